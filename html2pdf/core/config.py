import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path

from html2pdf.core.styles import DEFAULT_HIGHLIGHT_STYLE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "html2pdf.json"


@dataclass
class PageOptions:
    """Page geometry in CSS pixels."""
    width: float = 792.5
    height: float = 1123
    margin: float = 38.5
    print_background: bool = True


@dataclass
class SandboxOptions:
    """What the PDF engine may load while rendering."""
    allow_remote: bool = True
    remote_timeout: float = 5
    base_dir: str = "."


@dataclass
class Settings:
    page: PageOptions = field(default_factory=PageOptions)
    sandbox: SandboxOptions = field(default_factory=SandboxOptions)
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE
    show_title: bool = True

    @classmethod
    def load(cls, path=None):
        """
        Builds settings from defaults, overridden by a JSON file.

        Without an explicit path, `html2pdf.json` in the working directory is
        used when it exists. A broken file is logged and ignored.
        """
        settings = cls()
        config_path = Path(path) if path else Path(DEFAULT_CONFIG_NAME).resolve()
        if not path and not config_path.exists():
            return settings

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Settings: failed to read {config_path}: {e}")
            return settings

        if not isinstance(data, dict):
            logger.error(f"Settings: {config_path} must contain a JSON object")
            return settings

        settings.apply(data)
        logger.info(f"Settings: loaded {config_path}")
        return settings

    def apply(self, data):
        for key, value in data.items():
            if key == 'page' and isinstance(value, dict):
                _update_dataclass(self.page, value, 'page')
            elif key == 'sandbox' and isinstance(value, dict):
                _update_dataclass(self.sandbox, value, 'sandbox')
            elif key in ('highlight_style', 'show_title'):
                _set_checked(self, key, value, key)
            else:
                logger.warning(f"Settings: ignoring unknown key '{key}'")


def _same_kind(current, value):
    """JSON values only replace defaults of the same kind; ints count as numbers."""
    if isinstance(current, bool) or isinstance(value, bool):
        return isinstance(current, bool) and isinstance(value, bool)
    if isinstance(current, (int, float)):
        return isinstance(value, (int, float))
    return isinstance(value, type(current))


def _set_checked(target, key, value, label):
    current = getattr(target, key)
    if not _same_kind(current, value):
        logger.warning(f"Settings: ignoring '{label}': expected {type(current).__name__}, got {type(value).__name__}")
        return
    setattr(target, key, value)


def _update_dataclass(target, values, section):
    known = {f.name for f in fields(target)}
    for key, value in values.items():
        if key in known:
            _set_checked(target, key, value, f"{section}.{key}")
        else:
            logger.warning(f"Settings: ignoring unknown key '{section}.{key}'")
