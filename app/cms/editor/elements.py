"""
Field fragment generators.

Each generator reads the current value of `field_name` from the content item
and returns a ready-to-embed HTML fragment as bytes. `attrs` holds the
element's HTML attributes plus the special `label` key, which becomes a
<label> and is not emitted as an attribute.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from markupsafe import escape


class ElementError(ValueError):
    pass


def _value(field_name: str, post: Any) -> Any:
    if not field_name:
        raise ElementError("field_name is required")
    return getattr(post, field_name, None)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _split_label(attrs: Mapping[str, str] | None) -> tuple[str, dict[str, str]]:
    out = dict(attrs or {})
    label = out.pop("label", "") or ""
    return label, out


def _label_html(label: str) -> str:
    if not label:
        return ""
    return f'<label class="active" for="{escape("-".join(label.split(" ")))}">{escape(label)}</label>'


def _attrs_html(attrs: Mapping[str, str]) -> str:
    return "".join(f'{escape(k)}="{escape(v)}" ' for k, v in attrs.items())


def _self_closing(tag: str, name: str, label: str, data: str, attrs: Mapping[str, str]) -> bytes:
    html = (
        '<div class="input-field col s12">'
        + _label_html(label)
        + f'<{tag} value="{escape(data)}" '
        + _attrs_html(attrs)
        + f'name="{escape(name)}" />'
        + "</div>"
    )
    return html.encode("utf-8")


def input_field(field_name: str, post: Any, attrs: Mapping[str, str] | None = None) -> bytes:
    """<input> bound to `field_name`, e.g. input_field("title", post, {"label": "Title", "type": "text"})."""
    data = _text(_value(field_name, post))
    label, rest = _split_label(attrs)
    return _self_closing("input", field_name, label, data, rest)


def timestamp(field_name: str, post: Any, attrs: Mapping[str, str] | None = None) -> bytes:
    """
    <input> carrying a millisecond timestamp. An unset (0) timestamp renders
    as an empty value so the client can fill it in.
    """
    data = _text(_value(field_name, post))
    if data == "0":
        data = ""
    label, rest = _split_label(attrs)
    return _self_closing("input", field_name, label, data, rest)


def textarea(field_name: str, post: Any, attrs: Mapping[str, str] | None = None) -> bytes:
    data = _text(_value(field_name, post))
    label, rest = _split_label(attrs)
    rest.setdefault("class", "materialize-textarea")
    html = (
        '<div class="input-field col s12">'
        + _label_html(label)
        + "<textarea "
        + _attrs_html(rest)
        + f'name="{escape(field_name)}">'
        + str(escape(data))
        + "</textarea></div>"
    )
    return html.encode("utf-8")


def select(
    field_name: str,
    post: Any,
    attrs: Mapping[str, str] | None,
    options: Mapping[str, str],
) -> bytes:
    """<select> with one <option> per value -> text pair; the current value is pre-selected."""
    current = _text(_value(field_name, post))
    label, rest = _split_label(attrs)
    rest.setdefault("class", "browser-default")

    opts = ['<option value="">Select an option...</option>']
    for value, text in options.items():
        selected = ' selected="selected"' if str(value) == current else ""
        opts.append(f'<option value="{escape(value)}"{selected}>{escape(text)}</option>')

    html = (
        '<div class="input-field col s12">'
        + _label_html(label)
        + "<select "
        + _attrs_html(rest)
        + f'name="{escape(field_name)}">'
        + "".join(opts)
        + "</select></div>"
    )
    return html.encode("utf-8")


def checkbox(
    field_name: str,
    post: Any,
    attrs: Mapping[str, str] | None,
    options: Mapping[str, str],
) -> bytes:
    """
    Checkbox group. Each box is named `<field_name>.<index>` and is checked
    when its value appears in the item's current list value.
    """
    raw = _value(field_name, post)
    if raw is None:
        current: set[str] = set()
    elif isinstance(raw, str):
        current = {raw}
    elif isinstance(raw, Iterable):
        current = {str(v) for v in raw}
    else:
        current = {str(raw)}

    label, rest = _split_label(attrs)
    boxes = []
    for i, (value, text) in enumerate(options.items()):
        box_id = f"{field_name}-{i}"
        checked = 'checked="checked" ' if str(value) in current else ""
        boxes.append(
            '<p class="col s6">'
            + f'<input type="checkbox" id="{escape(box_id)}" name="{escape(field_name)}.{i}" '
            + f'value="{escape(value)}" '
            + _attrs_html(rest)
            + f"{checked}/>"
            + f'<label for="{escape(box_id)}">{escape(text)}</label>'
            + "</p>"
        )

    head = f'<label class="active">{escape(label)}</label>' if label else ""
    html = '<div class="input-field col s12">' + head + "".join(boxes) + "</div>"
    return html.encode("utf-8")
