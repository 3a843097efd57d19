import base64
import io

import qrcode
from PIL import Image, ImageDraw, ImageFont


QR_DEFAULTS = {
    "qr_box_size": 10,
    "qr_border": 5,
    "qr_fill_color": "black",
    "qr_back_color": "white",
}


def render_qr(payload: str, label: str = "", settings=None) -> Image.Image:
    """Render *payload* as a QR code image.

    Size and colours come from *settings* (``qr_box_size``, ``qr_border``,
    ``qr_fill_color``, ``qr_back_color``), falling back to the defaults.  When
    *label* is given it is drawn centred under the code.
    """
    options = QR_DEFAULTS.copy()
    options.update(settings or {})
    back_color = options["qr_back_color"]

    qr = qrcode.QRCode(
        version=1,
        box_size=int(options["qr_box_size"]),
        border=int(options["qr_border"]),
    )
    qr.add_data(payload)
    qr.make(fit=True)

    qr_img = qr.make_image(fill_color=options["qr_fill_color"], back_color=back_color).convert("RGB")

    text = (label or "").strip()
    if not text:
        return qr_img

    font = ImageFont.load_default()
    draw = ImageDraw.Draw(qr_img)
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    text_width = right - left
    text_height = bottom - top

    padding = 14
    extra_height = text_height + (padding * 2)
    canvas_width = max(qr_img.width, text_width + (padding * 2))
    canvas = Image.new("RGB", (canvas_width, qr_img.height + extra_height), back_color)

    qr_x = (canvas_width - qr_img.width) // 2
    canvas.paste(qr_img, (qr_x, 0))

    draw = ImageDraw.Draw(canvas)
    text_x = (canvas_width - text_width) // 2
    text_y = qr_img.height + padding
    draw.text((text_x, text_y), text, fill=options["qr_fill_color"], font=font)
    return canvas


def qr_png_bytes(payload: str, label: str = "", settings=None) -> bytes:
    buf = io.BytesIO()
    render_qr(payload, label=label, settings=settings).save(buf, format="PNG")
    return buf.getvalue()


def qr_data_url(payload: str, label: str = "", settings=None) -> str:
    encoded = base64.b64encode(qr_png_bytes(payload, label=label, settings=settings))
    return "data:image/png;base64," + encoded.decode("ascii")
