"""Configuration for the domain segmenter"""

import json
from pathlib import Path
from typing import Any, Dict


class SegmenterConfig:
    """Configuration for DomainAssembler

    Args:
        max_length: Longest accepted domain, input and decoded form (default: 255)
        max_suffix_level: Most labels a public suffix may span (default: 5)
        dictionary_path: Word list to load, the bundled one when None
        suffix_path: Public suffix list to load, the bundled one when None
        track_alternates: Whether alternate segmentations are built (default: True)
    """

    config_name = "segmenter_config.json"

    def __init__(
        self,
        max_length=255,
        max_suffix_level=5,
        dictionary_path=None,
        suffix_path=None,
        track_alternates=True,
        **kwargs
    ):
        self._validate(max_length=max_length, max_suffix_level=max_suffix_level)

        self.max_length = max_length
        self.max_suffix_level = max_suffix_level
        self.dictionary_path = str(dictionary_path) if dictionary_path else None
        self.suffix_path = str(suffix_path) if suffix_path else None
        self.track_alternates = bool(track_alternates)

    @staticmethod
    def _validate(**limits):
        for name, value in limits.items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    def update(self, config_dict: Dict[str, Any]):
        """Update configuration with values from dictionary.

        Raises ValueError without changing anything when a limit is invalid.
        """
        merged = {**self.to_dict(), **config_dict}
        self._validate(max_length=merged["max_length"], max_suffix_level=merged["max_suffix_level"])
        for key, value in config_dict.items():
            setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_length": self.max_length,
            "max_suffix_level": self.max_suffix_level,
            "dictionary_path": self.dictionary_path,
            "suffix_path": self.suffix_path,
            "track_alternates": self.track_alternates,
        }

    def to_json_string(self) -> str:
        return json.dumps(self.to_dict(), indent=2, sort_keys=True) + "\n"

    def save(self, save_directory) -> Path:
        """Write the config as JSON into a directory and return the file path"""
        save_directory = Path(save_directory)
        save_directory.mkdir(parents=True, exist_ok=True)
        config_file = save_directory / self.config_name
        config_file.write_text(self.to_json_string(), encoding="utf-8")
        return config_file

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "SegmenterConfig":
        # Unknown keys are swallowed by **kwargs
        return cls(**config_dict)

    @classmethod
    def from_file(cls, path) -> "SegmenterConfig":
        """Load from a JSON file, or from a directory holding segmenter_config.json"""
        path = Path(path)
        if path.is_dir():
            path = path / cls.config_name
        with open(path, "r", encoding="utf-8") as f:
            config_dict = json.load(f)
        if not isinstance(config_dict, dict):
            raise ValueError(f"{path} does not hold a JSON object")
        return cls.from_dict(config_dict)

    def __repr__(self):
        return f"{self.__class__.__name__} {self.to_json_string()}"
