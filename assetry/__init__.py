__version__ = '1.0.0'

from django.core.exceptions import ImproperlyConfigured

from assetry.base import RenderMode
from assetry.css import (
    CssRegistry,
    CssSource,
)
from assetry.errors import (
    AssetryException,
    FrozenStateError,
    InvalidIdentifier,
    ManifestReadError,
    OptimizerError,
)
from assetry.js import (
    JsCall,
    JsRegistry,
)
from assetry.manifest import ManifestReader
from assetry.meta import MetaRegistry
from assetry.optimizer import (
    Optimizer,
    StaticOptimizer,
)
from assetry.ordered import OrderedAssetList
from assetry.path import resolve
from assetry.title import TitleStack
from assetry.web_assets import WebAssets


def get_web_assets(request):
    """
    The `WebAssets` of this request. Created on first use if the middleware is not installed.
    """
    web_assets = getattr(request, 'web_assets', None)
    if web_assets is None:
        web_assets = WebAssets()
        request.web_assets = web_assets
    return web_assets


# noinspection PyPep8Naming
class middleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # a fresh set of registries for every request, nothing is shared between requests
        request.web_assets = WebAssets()
        return self.get_response(request)


__all__ = [
    'AssetryException',
    'CssRegistry',
    'CssSource',
    'FrozenStateError',
    'get_web_assets',
    'InvalidIdentifier',
    'JsCall',
    'JsRegistry',
    'ManifestReader',
    'ManifestReadError',
    'MetaRegistry',
    'middleware',
    'Optimizer',
    'OptimizerError',
    'OrderedAssetList',
    'RenderMode',
    'resolve',
    'StaticOptimizer',
    'TitleStack',
    'WebAssets',
]


try:
    from django.conf import settings

    if 'assetry' not in settings.INSTALLED_APPS:
        raise Exception("You must add 'assetry' to INSTALLED_APPS")
except ImproperlyConfigured:
    pass
