"""Domain services."""

from .base import Service
from .code_generator import InviteCodeGenerator
from .email_dispatcher import DispatchResult, EmailDispatcher, EmailMessage
from .invite_email import build_invite_email
from .invite_registry import InviteRegistry, IssuedInvite, RedeemedInvite

__all__ = [
    "DispatchResult",
    "EmailDispatcher",
    "EmailMessage",
    "InviteCodeGenerator",
    "InviteRegistry",
    "IssuedInvite",
    "RedeemedInvite",
    "Service",
    "build_invite_email",
]
