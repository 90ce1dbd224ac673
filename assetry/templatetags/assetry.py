from django import template

from assetry import get_web_assets

register = template.Library()


def _web_assets(context):
    web_assets = context.get('web_assets')
    if web_assets is not None:
        return web_assets
    request = context.get('request')
    if request is None:
        raise template.TemplateSyntaxError(
            'assetry tags need `request` or `web_assets` in the context. Did you forget the request context processor?'
        )
    return get_web_assets(request)


@register.simple_tag(takes_context=True)
def assetry_title(context):
    return _web_assets(context).render_page_title()


@register.simple_tag(takes_context=True)
def assetry_meta(context):
    return _web_assets(context).render_meta_tags()


@register.simple_tag(takes_context=True)
def assetry_css(context):
    return _web_assets(context).render_cascading_style_sheets()


@register.simple_tag(takes_context=True)
def assetry_js(context):
    return _web_assets(context).render_javascript()


@register.simple_tag(takes_context=True)
def assetry_head(context):
    return _web_assets(context).render_head()
