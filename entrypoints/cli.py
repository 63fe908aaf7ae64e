"""CLI entrypoint for the API catalog."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from api_catalog.adapters.input.cli.cli_adapter import CLIAdapter
from api_catalog.adapters.presentation.json_presenter import JsonPresenter
from api_catalog.adapters.presentation.text_presenter import TextPresenter
from api_catalog.common.config import get_settings
from api_catalog.common.container import create_gateway
from api_catalog.common.logging import configure_logging


def main() -> None:
  settings = get_settings()
  configure_logging(settings.log_level)
  presenters = {'text': TextPresenter(), 'json': JsonPresenter()}
  CLIAdapter(lambda api_url: create_gateway(settings, api_url), presenters).run()


if __name__ == '__main__':
  main()
