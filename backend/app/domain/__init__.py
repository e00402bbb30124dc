"""
Domain Layer - Console Forms and Display Rules

This layer contains the Pydantic form models the console validates before
calling the backend, plus the pure helpers for pagination, permissions,
uploads and display formatting.

Author: Customer Connect Team
Date: 2025-11-03
"""
from app.domain.market_research import MarketResearchForm
from app.domain.meeting import ActionItem, MeetingForm
from app.domain.order import OrderForm, OrderStatusUpdate
from app.domain.payment import InvoiceToDeliveryForm, PaymentForm
from app.domain.product import ProductForm, ProductStatusUpdate
from app.domain.role import RoleForm
from app.domain.settings import ExpertEmailForm, NewsForm, SapMaterialForm, SocialMediaLinkForm
from app.domain.user import LoginCredentials, UserForm
from app.domain.validation import ConsoleForm, validate_form

__all__ = [
    'ActionItem',
    'ConsoleForm',
    'ExpertEmailForm',
    'InvoiceToDeliveryForm',
    'LoginCredentials',
    'MarketResearchForm',
    'MeetingForm',
    'NewsForm',
    'OrderForm',
    'OrderStatusUpdate',
    'PaymentForm',
    'ProductForm',
    'ProductStatusUpdate',
    'RoleForm',
    'SapMaterialForm',
    'SocialMediaLinkForm',
    'UserForm',
    'validate_form',
]
