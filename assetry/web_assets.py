from django.utils.safestring import mark_safe

from assetry.base import (
    get_render_mode,
    log,
    RenderMode,
)
from assetry.css import CssRegistry
from assetry.errors import OptimizerError
from assetry.js import (
    JsCall,
    JsRegistry,
)
from assetry.manifest import ManifestReader
from assetry.meta import MetaRegistry
from assetry.optimizer import get_optimizer
from assetry.ordered import OrderedAssetList
from assetry.title import TitleStack


class WebAssets:
    # language=rst
    """
    All the web assets of one page: the title, meta elements, CSS and JavaScript.

    Create one per request (the assetry middleware does that for you and puts it on
    `request.web_assets`), add assets while the page is built, and render each part once:

    .. code-block:: python

        assets = request.web_assets
        assets.set_page_title('Shop')
        assets.append_page_title('Checkout')
        assets.css_append_source('app.pages.Checkout')
        assets.js_adm_set_main('app.pages.Checkout')
        assets.meta_add_keywords(['shop', 'checkout'])

    and in the template:

    .. code-block:: html

        {% load assetry %}
        <head>{% assetry_head %}</head>
        <body>... {% assetry_js %}</body>

    The render mode (`development` or `optimized`) is the same for all parts. In optimized mode only
    what has been registered with the `*_optimized_*` methods is rendered. If an optimizer is
    configured the development entries are handed to it before rendering, see `optimize()`.
    """

    def __init__(
        self,
        *,
        mode=None,
        optimizer=None,
        manifest_reader=None,
        title_separator=None,
        css_root=None,
        js_root=None,
    ):
        self.mode = get_render_mode(mode)
        self.optimizer = optimizer if optimizer is not None else get_optimizer()
        if manifest_reader is None:
            manifest_reader = ManifestReader()

        self.title = TitleStack(mode=self.mode, separator=title_separator)
        self.meta = MetaRegistry(mode=self.mode)
        self.css = CssRegistry(mode=self.mode, root=css_root, manifest_reader=manifest_reader)
        self.js = JsRegistry(mode=self.mode, root=js_root)

    def __repr__(self):
        return f'<{type(self).__name__} {self.mode}>'

    # Title

    def append_page_title(self, postfix):
        self.title.append(postfix)

    def push_page_title(self, prefix):
        self.title.push(prefix)

    def set_page_title(self, title):
        self.title.set(title)

    def get_page_title(self):
        return self.title.get()

    def render_page_title(self):
        return self.title.render()

    # Meta

    def meta_add_element(self, attributes, key=None):
        self.meta.add_element(attributes, key=key)

    def meta_add_keyword(self, keyword):
        self.meta.add_keyword(keyword)

    def meta_add_keywords(self, keywords):
        self.meta.add_keywords(keywords)

    def render_meta_tags(self):
        return self.meta.render()

    # CSS

    def css_append_line(self, css_line):
        self.css.append_line(css_line)

    def css_push_line(self, css_line):
        self.css.push_line(css_line)

    def css_append_source(self, location, media=None):
        self.css.append_source(location, media)

    def css_push_source(self, location, media=None):
        self.css.push_source(location, media)

    def css_append_sources_list(self, location, media=None):
        self.css.append_sources_list(location, media)

    def css_push_sources_list(self, location, media=None):
        self.css.push_sources_list(location, media)

    def css_optimized_append_source(self, url, media=None):
        self.css.optimized_append_source(url, media)

    def css_optimized_push_source(self, url, media=None):
        self.css.optimized_push_source(url, media)

    def render_cascading_style_sheets(self):
        if self._should_optimize(self.css) and self.css.sources:
            self.optimize_css()
        return self.css.render()

    # JavaScript

    def js_adm_function_call(self, name, js_function_name, args=()):
        self.js.call(name, js_function_name, args)

    def js_adm_optimized_function_call(self, namespace, js_function_name, args=()):
        self.js.optimized_call(namespace, js_function_name, args)

    def js_adm_set_main(self, name):
        self.js.set_main(name)

    def js_adm_set_page_specific_main(self, location):
        self.js.set_page_specific_main(location)

    def js_adm_optimized_set_main(self, main_js_script):
        self.js.optimized_set_main(main_js_script)

    def render_javascript(self):
        if self._should_optimize(self.js) and (self.js.calls or self.js.main):
            self.optimize_js()
        return self.js.render()

    # Build step

    def _should_optimize(self, registry):
        return self.mode is RenderMode.optimized and self.optimizer is not None and not registry._is_rendered

    def _get_optimizer(self):
        if self.mode is not RenderMode.optimized:
            raise OptimizerError(f'Optimizing is only possible in optimized mode, not in {self.mode} mode')
        if self.optimizer is None:
            raise OptimizerError('No optimizer configured. Pass optimizer= or set ASSETRY_OPTIMIZER')
        return self.optimizer

    def optimize_css(self):
        optimizer = self._get_optimizer()
        self.css.assert_not_rendered()
        # ask for everything first, a failing optimizer must not leave a half optimized registry
        sources = optimizer.css_sources(self.css.sources.to_sequence())
        log.debug('Optimized %s CSS sources to %s', len(self.css.sources), len(sources))
        for source in sources:
            self.css.optimized_append_source(source.url, source.media)
        self.css.sources = OrderedAssetList()

    def optimize_js(self):
        optimizer = self._get_optimizer()
        self.js.assert_not_rendered()
        calls = [JsCall(optimizer.js_namespace(x.namespace), x.function, x.args) for x in self.js.calls]
        main = optimizer.js_main(self.js.main) if self.js.main else None
        log.debug('Optimized %s JavaScript calls, main %s', len(calls), main)
        for call in calls:
            self.js.optimized_call(call.namespace, call.function, call.args)
        if main is not None:
            self.js.optimized_set_main(main)
        self.js.calls = []
        self.js.main = None

    def optimize(self):
        """
        Hand the development entries to the optimizer and register what it returns as optimized entries.
        """
        self.optimize_css()
        self.optimize_js()

    # Rendering

    def render_head(self):
        return mark_safe(
            '\n'.join(
                x for x in [self.render_page_title(), self.render_meta_tags(), self.render_cascading_style_sheets()] if x
            )
        )

    def render(self):
        return mark_safe('\n'.join(x for x in [self.render_head(), self.render_javascript()] if x))

    def __html__(self):
        return self.render()

    def __str__(self):
        return self.__html__()
