from django.apps import AppConfig


class AssetryConfig(AppConfig):
    name = 'assetry'
    verbose_name = 'assetry'
    default = True

    def ready(self):
        from assetry.base import get_render_mode

        # fail at startup instead of on the first request
        get_render_mode()
