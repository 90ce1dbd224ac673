from django.utils.html import (
    escape,
    format_html,
)
from django.utils.safestring import mark_safe


def render_attrs(attrs):
    """
    Render HTML attributes, or return '' if no attributes needs to be rendered.
    """
    if not attrs:
        return ''

    def parts():
        for key, value in sorted(attrs.items()):
            if value is None or value is False:
                continue
            if value is True:
                yield escape(key)
                continue
            if isinstance(value, (dict, list, tuple, set)):
                raise TypeError(f"Attributes can't be of type {type(value).__name__}, you sent {value} for key {key}")
            yield format_html('{}="{}"', key, value)

    r = mark_safe(' %s' % ' '.join(parts()))
    return '' if r == ' ' else r


def render_tag(tag, attrs, children=None):
    if children is None:
        return format_html('<{}{}>', tag, render_attrs(attrs))
    return format_html('<{tag}{attrs}>{children}</{tag}>', tag=tag, attrs=render_attrs(attrs), children=children)
