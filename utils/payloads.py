"""Build the string encoded into a QR code for each content category."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Union


class Category(str, Enum):
    WIFI = "wifi"
    TEXT = "text"
    PHONE = "phone"
    YOUTUBE = "youtube"
    EMAIL = "email"
    SMS = "sms"
    WEBSITE = "website"
    SNAPCHAT = "snapchat"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


# Picker order.
CATEGORY_LABELS = {
    Category.WIFI: "WiFi",
    Category.TEXT: "Text",
    Category.PHONE: "Phone Number",
    Category.YOUTUBE: "YouTube Video",
    Category.EMAIL: "Email",
    Category.SMS: "SMS",
    Category.WEBSITE: "Website",
    Category.SNAPCHAT: "Snapchat",
    Category.FACEBOOK: "Facebook",
    Category.INSTAGRAM: "Instagram",
}

SOCIAL_CATEGORIES = (Category.SNAPCHAT, Category.FACEBOOK, Category.INSTAGRAM)


@dataclass(frozen=True)
class FormField:
    key: str
    label: str
    keyboard: str = "default"


def _wifi(name, password):
    return f"WIFI:S:{name};T:WPA;P:{password};;"


def _email(address, message):
    return f"mailto:{address}?body={message}"


def _sms(number, message):
    return f"sms:{number}?body={message}"


def _website(value, _):
    return value if value.startswith("http") else f"https://{value}"


def _phone(number, _):
    return f"tel:{number}"


def _snapchat(user_id, _):
    return f"https://www.snapchat.com/add/{user_id}"


def _facebook(user_id, _):
    return f"https://www.facebook.com/{user_id}"


def _instagram(user_id, _):
    return f"https://www.instagram.com/{user_id}"


def _verbatim(value, _):
    return value


_BUILDERS: Dict[Category, Callable[[str, str], str]] = {
    Category.WIFI: _wifi,
    Category.TEXT: _verbatim,
    Category.PHONE: _phone,
    Category.YOUTUBE: _verbatim,
    Category.EMAIL: _email,
    Category.SMS: _sms,
    Category.WEBSITE: _website,
    Category.SNAPCHAT: _snapchat,
    Category.FACEBOOK: _facebook,
    Category.INSTAGRAM: _instagram,
}

_missing = set(Category) - set(_BUILDERS)
if _missing:
    raise RuntimeError(f"No payload builder for: {sorted(c.value for c in _missing)}")


def coerce_category(value: Union[Category, str, None]):
    """Return the matching ``Category`` or ``None`` for unknown values."""
    if isinstance(value, Category):
        return value
    try:
        return Category(value)
    except ValueError:
        return None


def build_payload(category: Union[Category, str], primary_value: str, secondary_value: str = "") -> str:
    """Return the payload for *category* built from the raw field values.

    Values are inserted verbatim. Nothing is escaped or trimmed, so a ``;`` in
    a WiFi password or an ``&`` in a message body ends up in the payload as
    typed. Unknown categories fall back to the primary value unchanged.
    """
    primary = primary_value or ""
    secondary = secondary_value or ""
    builder = _BUILDERS.get(coerce_category(category), _verbatim)
    return builder(primary, secondary)


def has_secondary(category: Union[Category, str]) -> bool:
    return coerce_category(category) in (Category.WIFI, Category.SMS, Category.EMAIL)


def form_fields(category: Union[Category, str]) -> List[FormField]:
    """Input fields shown for *category*, in display order."""
    cat = coerce_category(category)
    if cat is Category.WIFI:
        return [
            FormField("primary", "Enter WiFi Name"),
            FormField("secondary", "Enter WiFi Password"),
        ]
    if cat is Category.SMS:
        return [
            FormField("primary", "Enter Phone Number", "phone-pad"),
            FormField("secondary", "Enter Message"),
        ]
    if cat is Category.EMAIL:
        return [
            FormField("primary", "Enter Email Address", "email-address"),
            FormField("secondary", "Enter Message"),
        ]
    if cat in SOCIAL_CATEGORIES:
        return [FormField("primary", f"Enter {cat.value} ID")]
    if cat is Category.PHONE:
        return [FormField("primary", "Enter Phone Number", "phone-pad")]
    name = cat.value if cat is not None else str(category)
    return [FormField("primary", f"Enter {name}")]
