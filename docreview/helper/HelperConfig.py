"""Central configuration helper for the docreview client."""

import logging
import os


class HelperConfig:
    """
    Reads client and service settings from environment variables.

    Keys are case-insensitive and looked up upper-cased (``store_base_url`` -> ``STORE_BASE_URL``).
    A variable that is unset, empty or only whitespace counts as not set.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _read_raw(self, key: str) -> str | None:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return None
        return raw.strip()

    def _missing(self, key: str) -> ValueError:
        return ValueError(f"Environment variable '{key}' is not set.")

    def get_string_val(self, key: str, default: str | None = None) -> str:
        """Read a string setting, e.g. STORE_BASE_URL.

        Args:
            key (str): Environment variable name.
            default (str | None): Fallback if the variable is not set.

        Returns:
            str: The value without surrounding whitespace.

        Raises:
            ValueError: If the variable is not set and no default is given.
        """
        key = key.upper()
        val = self._read_raw(key)
        if val is None:
            if default is None:
                raise self._missing(key)
            return default
        return val

    def get_number_val(self, key: str, default: float | int | None = None) -> float | int:
        """Read a numeric setting such as STORE_TIMEOUT or REVIEW_MIN_QUERY_LENGTH.

        Values with a decimal point come back as float, all others as int.

        Raises:
            ValueError: If the variable is not set and no default is given,
                or the value is not a number.
        """
        key = key.upper()
        raw = self._read_raw(key)
        if raw is None:
            if default is None:
                raise self._missing(key)
            return default
        try:
            return int(raw) if "." not in raw else float(raw)
        except ValueError:
            raise ValueError(f"Environment variable '{key}' is not a valid number: '{raw}'.")

    def get_bool_val(self, key: str, default: bool | None = None) -> bool:
        """Read a flag. "true", "1" and "yes" are true, anything else is false."""
        key = key.upper()
        raw = self._read_raw(key)
        if raw is None:
            if default is None:
                raise self._missing(key)
            return default
        return raw.lower() in ("true", "1", "yes")

    def get_list_val(self, key: str, default: list | None = None, separator: str = ",", element_type: type = str) -> list:
        """Read a list setting in the form "[elem1,elem2,...]", e.g. STORE_SUCCESS_STATUSES.

        Args:
            key (str): Environment variable name.
            default (list | None): Fallback if the variable is not set.
            separator (str): The delimiter between elements.
            element_type (type): The type each element is cast to.

        Returns:
            list: The elements, blank entries dropped.

        Raises:
            ValueError: If the variable is not set and no default is given.
            ValueError: If the value is not bracketed or an element can not be cast.
        """
        key = key.upper()
        raw_val = self._read_raw(key)
        if raw_val is None:
            if default is None:
                raise self._missing(key)
            return default
        if not raw_val.startswith("[") or not raw_val.endswith("]"):
            raise ValueError(f"Environment variable '{key}' must be in the format '[elem1{separator}elem2{separator}...]'. Got: '{raw_val}'")
        elements = [v.strip() for v in raw_val[1:-1].split(separator) if v.strip()]
        try:
            return [element_type(elem) for elem in elements]
        except ValueError as e:
            raise ValueError(f"Environment variable '{key}' contains invalid elements: {e}. Type set to {element_type.__name__}. Got: '{raw_val}'")

    def get_logger(self) -> logging.Logger:
        return self._logger
