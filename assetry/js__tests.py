from datetime import date

import pytest

from assetry.errors import (
    FrozenStateError,
    InvalidIdentifier,
)
from assetry.js import (
    JsCall,
    JsRegistry,
    to_js,
)

CONFIG = '<script>var require = {"baseUrl": "/js"};</script>'
LOADER = '<script src="/js/require.js"></script>'


def call_html(namespace, function, args):
    return (
        f'<script>require(["{namespace}"], function (module) {{ module["{function}"].apply(null, {args}); }});</script>'
    )


def test_render_nothing():
    assert JsRegistry(mode='development').render() == CONFIG + '\n' + LOADER


def test_module_ids_resolve_below_the_js_root():
    js = JsRegistry(mode='development', root='/static/js')
    js.call('app.Foo', 'init')

    assert js.render() == '\n'.join(
        [
            '<script>var require = {"baseUrl": "/static/js"};</script>',
            LOADER,
            call_html('app/Foo', 'init', '[]'),
        ]
    )


def test_no_base_url_without_a_js_root():
    js = JsRegistry(mode='development', root='')
    js.call('app.Foo', 'init')

    assert js.render() == LOADER + '\n' + call_html('app/Foo', 'init', '[]')


def test_calls():
    js = JsRegistry(mode='development')
    js.call('app.widgets.Basket', 'init', ['basket', {'currency': 'EUR'}])
    js.call('App\\Widgets\\Search', 'focus')
    js.call('vendor/tracker', 'track', [1, None, True])

    assert js.calls == [
        JsCall('app/widgets/Basket', 'init', ('basket', {'currency': 'EUR'})),
        JsCall('App/Widgets/Search', 'focus', ()),
        JsCall('vendor/tracker', 'track', (1, None, True)),
    ]
    assert js.render() == '\n'.join(
        [
            CONFIG,
            LOADER,
            call_html('app/widgets/Basket', 'init', '["basket", {"currency": "EUR"}]'),
            call_html('App/Widgets/Search', 'focus', '[]'),
            call_html('vendor/tracker', 'track', '[1, null, true]'),
        ]
    )


def test_calls_are_not_deduplicated():
    js = JsRegistry(mode='development')
    js.call('app.Foo', 'bar')
    js.call('app.Foo', 'bar')
    assert js.render().count('module["bar"]') == 2


def test_main():
    js = JsRegistry(mode='development')
    js.call('app.Foo', 'bar')
    js.set_main('app.pages.Cart')
    js.set_main('app.pages.Checkout')

    assert js.main == '/js/app/pages/Checkout.js'
    assert js.render() == '\n'.join(
        [
            CONFIG,
            '<script data-main="/js/app/pages/Checkout.js" src="/js/require.js"></script>',
            call_html('app/Foo', 'bar', '[]'),
        ]
    )


def test_main_literal():
    js = JsRegistry(mode='development', root='/static/js')
    js.set_main('/static/js/main.js')
    assert js.main == '/static/js/main.js'
    js.set_main('app.Main')
    assert js.main == '/static/js/app/Main.js'


def test_set_page_specific_main_is_deprecated():
    js = JsRegistry(mode='development')
    with pytest.deprecated_call():
        js.set_page_specific_main('app.pages.Checkout')
    assert js.main == '/js/app/pages/Checkout.js'


def test_arguments_are_escaped():
    js = JsRegistry(mode='development')
    js.call('app.Foo', 'bar', ['</script><script>alert(1)</script>', 'a & b'])
    rendered = js.render()

    assert '</script><script>alert' not in rendered
    assert '"\\u003C/script\\u003E\\u003Cscript\\u003Ealert(1)\\u003C/script\\u003E", "a \\u0026 b"' in rendered


def test_arguments_use_the_django_json_encoder():
    assert to_js([date(1948, 2, 19)]) == '["1948-02-19"]'


def test_invalid_calls():
    js = JsRegistry(mode='development')
    with pytest.raises(InvalidIdentifier):
        js.call('', 'bar')
    with pytest.raises(InvalidIdentifier):
        js.call('app.Foo', '')
    with pytest.raises(InvalidIdentifier):
        js.call('app..Foo', 'bar')
    with pytest.raises(InvalidIdentifier):
        js.set_main('')
    with pytest.raises(InvalidIdentifier):
        js.optimized_call('', 'bar')
    with pytest.raises(InvalidIdentifier):
        js.optimized_set_main('')
    assert js.calls == []
    assert js.main is None


def test_optimized():
    js = JsRegistry(mode='optimized')
    js.optimized_call('app/widgets/Basket', 'init', ['basket'])
    js.optimized_set_main('/build/js/app/pages/Checkout.main.min.js')

    assert js.render() == '\n'.join(
        [
            '<script src="/build/js/app/pages/Checkout.main.min.js"></script>',
            call_html('app/widgets/Basket', 'init', '["basket"]'),
        ]
    )


def test_optimized_without_main(settings):
    settings.ASSETRY_OPTIMIZED_BOOTSTRAP_URL = '/build/js/bootstrap.min.js'
    js = JsRegistry(mode='optimized')
    js.optimized_call('app/Foo', 'bar')

    assert js.render() == '\n'.join(
        [
            '<script src="/build/js/bootstrap.min.js"></script>',
            call_html('app/Foo', 'bar', '[]'),
        ]
    )


def test_optimized_bootstrap_falls_back_to_requirejs():
    assert JsRegistry(mode='optimized').render() == LOADER


def test_optimized_mode_renders_no_development_entries():
    js = JsRegistry(mode='optimized')
    js.call('app.Foo', 'bar')
    js.set_main('app.pages.Checkout')

    assert js.render() == LOADER


def test_development_mode_renders_no_optimized_entries():
    js = JsRegistry(mode='development')
    js.optimized_call('app/Foo', 'bar')
    js.optimized_set_main('/build/main.js')

    assert js.render() == CONFIG + '\n' + LOADER


def test_mutation_after_render():
    js = JsRegistry(mode='development')
    js.call('app.Foo', 'bar')
    before = js.render()

    with pytest.raises(FrozenStateError):
        js.call('app.Foo', 'baz')
    with pytest.raises(FrozenStateError):
        js.set_main('app.Main')
    with pytest.raises(FrozenStateError):
        js.optimized_call('app/Foo', 'baz')
    with pytest.raises(FrozenStateError):
        js.optimized_set_main('/build/main.js')

    assert js.render() == before
