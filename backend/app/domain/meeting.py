"""
Meeting Minutes Form Model

Author: Customer Connect Team
Date: 2025-11-04
"""
from datetime import date
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from app.domain.validation import ConsoleForm, blank_to_none, split_list


class ActionItem(BaseModel):
    """Follow-up captured during a meeting"""

    item: str
    assignee: Optional[str] = ""
    due_date: Optional[date] = None
    status: str = "pending"

    @field_validator("due_date", mode="before")
    @classmethod
    def _blank_date(cls, value):
        return blank_to_none(value)


class MeetingForm(ConsoleForm):
    """
    Minutes of meeting (MoM) form

    Attendees and action items are collected one by one on the screen.
    Text still sitting in the "new attendee" and "new action item" inputs
    when the form is submitted is added to the lists.
    """

    REQUIRED: ClassVar[Dict[str, str]] = {
        "mom_number": "MoM Number is required",
        "title": "Title is required",
        "meeting_date": "Meeting Date is required",
        "status": "Status is required",
    }

    mom_number: str
    title: str
    meeting_date: date
    customer_code: Optional[str] = ""
    attendees: List[str] = Field(default_factory=list)
    agenda: Optional[str] = ""
    minutes: Optional[str] = ""
    action_items: List[ActionItem] = Field(default_factory=list)
    next_meeting_date: Optional[date] = None
    status: str = "draft"

    @model_validator(mode="before")
    @classmethod
    def _add_pending_entries(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        data["attendees"] = add_attendee(split_list(data.get("attendees")), data.pop("new_attendee", ""))
        data["action_items"] = add_action_item(split_list(data.get("action_items")), data.pop("new_action_item", ""))
        return data

    @field_validator("attendees", "action_items", mode="before")
    @classmethod
    def _split_lists(cls, value):
        return split_list(value)

    @field_validator("next_meeting_date", mode="before")
    @classmethod
    def _blank_date(cls, value):
        return blank_to_none(value)

    @field_validator("attendees")
    @classmethod
    def _drop_blank_attendees(cls, value: List[str]) -> List[str]:
        return [name.strip() for name in value if name and name.strip()]


def add_attendee(attendees: List[str], name: str) -> List[str]:
    """Append a trimmed attendee; blank input leaves the list unchanged"""
    name = (name or "").strip()
    if not name:
        return list(attendees)
    return [*attendees, name]


def add_action_item(action_items: List[Dict[str, Any]], text: str) -> List[Dict[str, Any]]:
    """Append a pending, unassigned action item; blank input is ignored"""
    text = (text or "").strip()
    if not text:
        return list(action_items)
    return [*action_items, {"item": text, "assignee": "", "due_date": "", "status": "pending"}]
