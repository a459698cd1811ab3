import logging, os, pyjson5
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class IncludeConfig:
    """
    Feature toggles for the host integration.

    `track_path` registers every dependency with the build system's tracker,
    `relative_path` resolves paths relative to the including file instead of
    `root`. Both are off by default.
    """

    FILE_NAME = "include_shader.json"

    track_path: bool
    relative_path: bool
    root: str
    encoding: str

    def __init__(self, root: str = None) -> None:
        self.track_path = False
        self.relative_path = False
        self.root = os.path.abspath(root if root is not None else os.getcwd())
        self.encoding = "utf-8"

    def read_json_file(self, path: str, profiles: list[str] = None):
        if not os.path.isfile(path):
            return self
        with open(path, encoding="utf-8") as f:
            json_data = pyjson5.load(f)

        config_folder = os.path.dirname(os.path.abspath(path))
        self.root = config_folder
        self.read_json(json_data, profiles, config_folder)
        return self

    def read_json(
        self, json_data: dict, profiles: list[str] = None, config_folder: str = None
    ):
        if profiles is None:
            profiles = []
        if config_folder is None:
            config_folder = self.root

        properties: list[tuple[str, Callable[[Any], Any]]] = [
            ("track_path", bool),
            ("relative_path", bool),
            ("root", lambda p: os.path.normpath(os.path.join(config_folder, p))),
            ("encoding", str),
        ]

        if "base_profile" in json_data:
            self._apply(json_data["base_profile"], properties)

        json_profiles = json_data.get("profiles", {})
        for profile in profiles:
            if profile not in json_profiles:
                logger.warning(f'Profile "{profile}" was not found!')
                continue
            self._apply(json_profiles[profile], properties)

        return self

    def _apply(self, profile: dict, properties: list[tuple[str, Callable[[Any], Any]]]):
        for property_name, value_getter in properties:
            if property_name in profile:
                setattr(self, property_name, value_getter(profile[property_name]))
