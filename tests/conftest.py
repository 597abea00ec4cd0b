import pytest

from curl2py import config
from curl2py.generator.options import GenerationOptions, Library


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the user's own config file and env var out of every test."""
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "missing" / "config.yaml")


@pytest.fixture
def make_options():
    """Factory for GenerationOptions with every switch off unless overridden."""

    def _make(library=Library.REQUESTS, **overrides) -> GenerationOptions:
        fields = dict(
            library=library,
            include_imports=False,
            wrap_async=False,
            add_error_handling=False,
            use_session=False,
        )
        fields.update(overrides)
        return GenerationOptions(**fields)

    return _make
