"""Buyer contact rules: a QQ number or an e-mail address.

A bare QQ number is stored as its QQ mailbox, so `12345678` and
`12345678@qq.com` name the same buyer.
"""

from __future__ import annotations

import re
import typing as t

QQ_MAIL_DOMAIN = "@qq.com"

_QQ_NUMBER_RE = re.compile(r"^\d{5,20}$", re.ASCII)
_VALID_QQ_RE = re.compile(r"^\d{6,20}$", re.ASCII)
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$", re.ASCII)

EMPTY_CONTACT_MESSAGE = "Contact must not be empty"
INVALID_CONTACT_MESSAGE = "Contact must be a valid QQ number (6-20 digits) or e-mail address"


def normalize_contact(contact: str) -> str:
    if not contact or not contact.strip():
        return contact
    trimmed = contact.strip()
    if _QQ_NUMBER_RE.match(trimmed):
        return trimmed + QQ_MAIL_DOMAIN
    return trimmed


def is_valid_contact(contact: str) -> bool:
    if not contact or not contact.strip():
        return False
    normalized = normalize_contact(contact)
    if _EMAIL_RE.match(normalized):
        return True
    return bool(_VALID_QQ_RE.match(normalized.replace(QQ_MAIL_DOMAIN, "", 1)))


def contact_validation_error(contact: str) -> t.Optional[str]:
    if not contact or not contact.strip():
        return EMPTY_CONTACT_MESSAGE
    if not is_valid_contact(contact):
        return INVALID_CONTACT_MESSAGE
    return None
