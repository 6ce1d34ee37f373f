import importlib


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_dashboard_page_exports_renderers():
    pages = importlib.import_module("app.pages")

    assert callable(pages.render_dashboard_page)
    assert callable(pages.render_dashboard_error)
