import json
from pathlib import Path

from django.conf import settings
from django.utils.module_loading import import_string

from assetry.css import CssSource
from assetry.errors import OptimizerError


class Optimizer:
    # language=rst
    """
    The optimizer is the bridge to the build step that bundles and minifies assets. assetry never
    builds anything itself, it only asks the optimizer for the references to what the build produced.

    Subclass this and implement the three methods, then point `ASSETRY_OPTIMIZER` to it.
    """

    def css_sources(self, sources):
        """
        Return the optimized `CssSource` list that replaces `sources`.
        """
        raise NotImplementedError()

    def js_namespace(self, namespace):
        raise NotImplementedError()

    def js_main(self, main):
        raise NotImplementedError()


class StaticOptimizer(Optimizer):
    # language=rst
    """
    Replays a mapping produced ahead of time by the build:

    .. code-block:: json

        {
            "css": {"/css/reset.css": "/build/site.min.css", "/css/app/Checkout.css": "/build/site.min.css"},
            "js_namespaces": {"app/widgets/Basket": "app/widgets/Basket"},
            "js_mains": {"/js/app/pages/Checkout.js": "/build/js/app/pages/Checkout.main.min.js"}
        }

    Several sources can map to the same bundle, it is only included once.
    """

    def __init__(self, css=None, js_namespaces=None, js_mains=None):
        self.css = dict(css or {})
        self.js_namespaces = dict(js_namespaces or {})
        self.js_mains = dict(js_mains or {})

    @classmethod
    def from_json(cls, filename):
        try:
            data = json.loads(Path(filename).read_text(encoding='utf8'))
        except (OSError, ValueError) as e:
            raise OptimizerError(f'Could not read optimizer mapping {filename}: {e}') from e
        return cls(**{k: data.get(k) for k in ('css', 'js_namespaces', 'js_mains')})

    def lookup(self, mapping, what, key):
        try:
            return mapping[key]
        except KeyError:
            raise OptimizerError(f'No optimized {what} for {key!r}') from None

    def css_sources(self, sources):
        return [CssSource(self.lookup(self.css, 'CSS source', source.url), source.media) for source in sources]

    def js_namespace(self, namespace):
        return self.lookup(self.js_namespaces, 'JavaScript namespace', namespace)

    def js_main(self, main):
        return self.lookup(self.js_mains, 'JavaScript main', main)


def get_optimizer():
    factory = getattr(settings, 'ASSETRY_OPTIMIZER', None)
    if factory is None:
        return None
    if isinstance(factory, str):
        factory = import_string(factory)
    return factory()
