import json
import warnings
from typing import (
    Any,
    NamedTuple,
    Tuple,
)

from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from assetry.attrs import render_tag
from assetry.base import (
    get_js_root,
    get_optimized_bootstrap_url,
    get_requirejs_url,
    Registry,
)
from assetry.errors import InvalidIdentifier
from assetry.path import (
    is_literal,
    resolve,
    resolve_location,
)

_json_script_escapes = {
    ord('>'): '\\u003E',
    ord('<'): '\\u003C',
    ord('&'): '\\u0026',
}


class JsCall(NamedTuple):
    namespace: str
    function: str
    args: Tuple[Any, ...] = ()


def to_js(value):
    """
    JSON encode `value` so it can be put inside an inline script element.
    """
    return mark_safe(json.dumps(value, cls=DjangoJSONEncoder).translate(_json_script_escapes))


def render_js_call(call):
    return format_html(
        '<script>require([{namespace}], function (module) {{ module[{function}].apply(null, {args}); }});</script>',
        namespace=to_js(call.namespace),
        function=to_js(call.function),
        args=to_js(list(call.args)),
    )


class JsRegistry(Registry):
    # language=rst
    """
    JavaScript for a page, executed with RequireJS.

    In development mode the RequireJS loader is included together with the main module of the
    page, with `baseUrl` set to `ASSETRY_JS_ROOT` so module ids like `app/widgets/Basket` load from
    below it. Every call is rendered as a separate `require` of its module:

    .. code-block:: python

        js.set_main('app.pages.Checkout')
        js.call('app.widgets.Basket', 'init', ['basket', {'currency': 'EUR'}])

    In optimized mode the main module is a single bundle produced by the build, and calls refer to
    the namespaces as they are known inside that bundle.
    """

    def __init__(self, *, mode=None, root=None, requirejs_url=None, optimized_bootstrap_url=None):
        super(JsRegistry, self).__init__(mode=mode)
        self.root = root if root is not None else get_js_root()
        self.requirejs_url = requirejs_url if requirejs_url is not None else get_requirejs_url()
        self.optimized_bootstrap_url = (
            optimized_bootstrap_url if optimized_bootstrap_url is not None else get_optimized_bootstrap_url()
        )
        self.calls = []
        self.main = None
        self.optimized_calls = []
        self.optimized_main = None

    def resolve_namespace(self, name):
        if not name:
            raise InvalidIdentifier('Namespace can not be empty')
        if is_literal(name):
            return name
        return resolve(name)

    def resolve_main(self, name):
        return resolve_location(name, root=self.root, extension='js')

    def call(self, name, function, args=()):
        self.assert_not_rendered()
        if not function:
            raise InvalidIdentifier(f'Function name can not be empty (namespace {name!r})')
        namespace = self.resolve_namespace(name)
        self.note_mode_mismatch(namespace, optimized=False)
        self.calls.append(JsCall(namespace, function, tuple(args)))

    def set_main(self, name):
        self.assert_not_rendered()
        self.main = self.resolve_main(name)
        self.note_mode_mismatch(self.main, optimized=False)

    def set_page_specific_main(self, name):
        warnings.warn(
            'set_page_specific_main() is deprecated, use set_main() instead', category=DeprecationWarning, stacklevel=2
        )
        self.set_main(name)

    def optimized_call(self, namespace, function, args=()):
        self.assert_not_rendered()
        if not namespace or not function:
            raise InvalidIdentifier(f'Namespace and function name are required, got {namespace!r} and {function!r}')
        self.note_mode_mismatch(namespace, optimized=True)
        self.optimized_calls.append(JsCall(namespace, function, tuple(args)))

    def optimized_set_main(self, url):
        self.assert_not_rendered()
        if not url:
            raise InvalidIdentifier('The url of the optimized main can not be empty')
        self.note_mode_mismatch(url, optimized=True)
        self.optimized_main = url

    def render_config(self):
        # read by RequireJS when it loads, so module ids resolve below the JS root and not the page url
        if not self.root:
            return None
        return format_html('<script>var require = {};</script>', to_js({'baseUrl': self.root}))

    def render_development(self):
        config = self.render_config()
        loader = render_tag('script', {'src': self.requirejs_url, 'data-main': self.main}, children='')
        return mark_safe('\n'.join([x for x in [config, loader] if x] + [render_js_call(x) for x in self.calls]))

    def render_optimized(self):
        bootstrap = render_tag('script', dict(src=self.optimized_main or self.optimized_bootstrap_url), children='')
        return mark_safe('\n'.join([bootstrap] + [render_js_call(x) for x in self.optimized_calls]))
