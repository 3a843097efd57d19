"""
Payload Builder Tests
=====================
Category -> payload string rules, field layout per category.
"""

import pytest

from utils.payloads import Category, build_payload, coerce_category, form_fields, has_secondary


class TestPayloadRules:

    def test_wifi(self):
        assert build_payload("wifi", "HomeNet", "secret") == "WIFI:S:HomeNet;T:WPA;P:secret;;"

    def test_email(self):
        assert build_payload("email", "a@b.com", "hi") == "mailto:a@b.com?body=hi"

    def test_sms(self):
        assert build_payload("sms", "555", "hi") == "sms:555?body=hi"

    def test_website_adds_https(self):
        assert build_payload("website", "example.com", "ignored") == "https://example.com"

    @pytest.mark.parametrize("value", ["http://example.com", "https://example.com"])
    def test_website_keeps_prefixed_value(self, value):
        assert build_payload("website", value, "") == value

    def test_website_prefix_check_is_case_sensitive(self):
        assert build_payload("website", "HTTP://example.com") == "https://HTTP://example.com"

    def test_phone(self):
        assert build_payload("phone", "+15551234") == "tel:+15551234"

    def test_social_profiles(self):
        assert build_payload("snapchat", "myid") == "https://www.snapchat.com/add/myid"
        assert build_payload("facebook", "myid") == "https://www.facebook.com/myid"
        assert build_payload("instagram", "myid", "x") == "https://www.instagram.com/myid"

    @pytest.mark.parametrize("category", ["text", "youtube"])
    def test_verbatim_categories(self, category):
        value = "https://youtu.be/abc  with spaces"
        assert build_payload(category, value, "ignored") == value

    def test_unknown_category_passes_value_through(self):
        assert build_payload("vcard", "hello", "x") == "hello"

    def test_accepts_enum_members(self):
        assert build_payload(Category.WIFI, "HomeNet", "secret") == build_payload("wifi", "HomeNet", "secret")


class TestPayloadEdgeCases:

    def test_empty_primary_is_allowed(self):
        assert build_payload("phone", "") == "tel:"
        assert build_payload("wifi", "", "") == "WIFI:S:;T:WPA;P:;;"

    def test_none_values_treated_as_empty(self):
        assert build_payload("sms", None, None) == "sms:?body="

    def test_values_are_not_escaped(self):
        assert build_payload("wifi", "My Net", "p;a&ss") == "WIFI:S:My Net;T:WPA;P:p;a&ss;;"
        assert build_payload("email", "a@b.com", "hi & bye") == "mailto:a@b.com?body=hi & bye"

    def test_deterministic(self):
        first = build_payload("email", "a@b.com", "hi")
        second = build_payload("email", "a@b.com", "hi")
        assert first == second


class TestCategories:

    def test_every_category_has_a_label(self):
        assert [c.label for c in Category] == [
            "WiFi", "Text", "Phone Number", "YouTube Video", "Email",
            "SMS", "Website", "Snapchat", "Facebook", "Instagram",
        ]

    def test_coerce_category(self):
        assert coerce_category("sms") is Category.SMS
        assert coerce_category(Category.SMS) is Category.SMS
        assert coerce_category("nope") is None
        assert coerce_category(None) is None

    def test_has_secondary(self):
        with_secondary = {c for c in Category if has_secondary(c)}
        assert with_secondary == {Category.WIFI, Category.SMS, Category.EMAIL}


class TestFormFields:

    def test_wifi_fields(self):
        fields = form_fields("wifi")
        assert [f.key for f in fields] == ["primary", "secondary"]
        assert [f.label for f in fields] == ["Enter WiFi Name", "Enter WiFi Password"]

    def test_email_uses_email_keyboard(self):
        primary = form_fields(Category.EMAIL)[0]
        assert primary.keyboard == "email-address"

    def test_social_id_label(self):
        assert form_fields("instagram")[0].label == "Enter instagram ID"

    def test_phone_single_field(self):
        fields = form_fields("phone")
        assert len(fields) == 1
        assert fields[0].keyboard == "phone-pad"

    def test_generic_label(self):
        assert form_fields("youtube")[0].label == "Enter youtube"
