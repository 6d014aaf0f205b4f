"""
Main entry point for the weather profiles viewer.

Wires configuration, logging, the backend client, the selection store and
the view-model builder together, and exposes them on the command line.
"""

import json
import sys
from typing import Any, List, Optional

from .core import Config, setup_logger, LoggerContext, constants
from .api import WeatherProfilesAPI
from .models import Profile, ProfileViewModel
from .processing import ViewModelBuilder
from .services import ProfileDirectory, SelectionStore


class WeatherProfilesApp:
    """Main application for browsing per-location telemetry."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level=self.config.log_level
        )
        self.logger.info(f"Configuration: {self.config}")

        self.api_client: Optional[WeatherProfilesAPI] = None
        self.directory: Optional[ProfileDirectory] = None
        self.store: Optional[SelectionStore] = None
        self.builder: Optional[ViewModelBuilder] = None

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.logger.info("Initializing components...")

        self.api_client = WeatherProfilesAPI(
            base_url=self.config.api_base_url,
            timeout=self.config.api_timeout,
            max_retries=self.config.api_max_retries,
            verify_ssl=self.config.api_verify_ssl,
            logger=self.logger
        )
        self.directory = ProfileDirectory(self.api_client, logger=self.logger)
        self.store = SelectionStore(self.api_client, logger=self.logger)
        self.builder = ViewModelBuilder(self.config, logger=self.logger)

        self.logger.info("All components initialized successfully")

    def _require_components(self) -> None:
        if not all([self.api_client, self.directory, self.store, self.builder]):
            raise RuntimeError("Components not properly initialized")

    def list_profiles(self) -> List[Profile]:
        """Load the profile list and return the profiles that can be placed on the map."""
        self._require_components()

        with LoggerContext(self.logger, "profile list fetch"):
            self.directory.load()

        return self.directory.placeable_profiles()

    def select(self, profile_id: Any, display_name: Optional[str] = None) -> ProfileViewModel:
        """
        Select a profile and build its view model.

        Args:
            profile_id: Profile ID
            display_name: Name to show. Looked up in the profile list if None.

        Returns:
            View model of the current selection (unchanged if the fetch failed)
        """
        self._require_components()

        if display_name is None:
            self.directory.load()
            profile = self.directory.find(profile_id)
            display_name = profile.display_name if profile else constants.UNNAMED_PROFILE

        with LoggerContext(self.logger, f"selection of {display_name}"):
            self.store.select(profile_id, display_name)

        return self.builder.build(self.store.snapshot)

    def close(self) -> None:
        if self.api_client:
            self.api_client.close()


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Weather profiles telemetry viewer"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("profiles", help="List profiles that can be placed on the map")

    show = subparsers.add_parser("show", help="Print charts and table data for a profile")
    show.add_argument("profile_id", help="Profile ID")
    show.add_argument("--name", default=None, help="Display name (default: from profile list)")

    args = parser.parse_args(argv)

    try:
        app = WeatherProfilesApp(config_file=args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    try:
        app.initialize_components()

        if args.command == "profiles":
            for profile in app.list_profiles():
                print(f"{profile.id}\t{profile.display_name}\t{profile.coordinates_label}")
        else:
            view = app.select(args.profile_id, args.name)
            print(json.dumps(view.to_dict(), indent=2, default=str))

    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)

    finally:
        app.close()


if __name__ == "__main__":
    main()
