from dataclasses import dataclass, field
from typing import Optional

from .errors import MissingField
from .payloads import Category, build_payload, coerce_category


class CategoryLocked(ValueError):
    """Raised when the category is changed after a code was generated."""


@dataclass
class FormState:
    primary_value: str = ""
    secondary_value: str = ""


@dataclass
class QRSession:
    category: Optional[Category] = None
    form: FormState = field(default_factory=FormState)
    generated: bool = False

    def select_category(self, category):
        if self.generated:
            raise CategoryLocked("Go back before choosing another QR code type.")
        cat = coerce_category(category)
        if cat is None:
            raise ValueError(f"Unknown QR code type: {category!r}")
        self.category = cat
        self.form = FormState()

    @property
    def can_generate(self) -> bool:
        return self.category is not None and bool(self.form.primary_value)

    @property
    def payload(self) -> str:
        # Recomputed on every access.
        return build_payload(self.category, self.form.primary_value, self.form.secondary_value)

    def generate(self) -> str:
        if not self.can_generate:
            raise MissingField()
        self.generated = True
        return self.payload

    def reset(self):
        self.category = None
        self.form = FormState()
        self.generated = False
