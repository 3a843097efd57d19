"""Hand ``sms:`` and ``mailto:`` links to the platform's default handler."""

import logging
import webbrowser

from .errors import DispatchFailed, MissingField
from .payloads import Category, build_payload


logger = logging.getLogger(__name__)


def open_url(uri):
    return webbrowser.open(uri)


def _dispatch(uri, opener, failure_message):
    try:
        opened = opener(uri)
    except (webbrowser.Error, OSError) as exc:
        logger.warning("Opening %s failed: %s", uri.split(":", 1)[0], exc)
        raise DispatchFailed(failure_message) from exc
    if not opened:
        logger.warning("No handler accepted %s link", uri.split(":", 1)[0])
        raise DispatchFailed(failure_message)
    return uri


def send_sms(number, message, opener=open_url):
    if not number or not message:
        raise MissingField("Please provide a phone number and a message.")
    uri = build_payload(Category.SMS, number, message)
    return _dispatch(uri, opener, "Unable to send SMS.")


def send_email(address, message, opener=open_url):
    if not address or not message:
        raise MissingField("Please provide an email address and a message.")
    uri = build_payload(Category.EMAIL, address, message)
    return _dispatch(uri, opener, "Unable to send email.")
