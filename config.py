# config.py
import os
import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

COUNTRIES_KEY = "countries"
LANGUAGES_KEY = "languages"
OPERATING_SYSTEMS_KEY = "operatingSystems"
STRICT_KEY = "FORM_OPTIONS_STRICT"

TRUTHY = {"1", "true", "yes", "on"}


class ConfigurationError(Exception):
    pass


def parse_option_list(raw: str) -> Tuple[str, ...]:
    # "USA, Canada,,India" -> ("USA", "Canada", "India")
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class FormOptions:
    """Selectable values offered by the student form, in configuration order."""

    countries: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = ()
    operating_systems: Tuple[str, ...] = ()

    @classmethod
    def from_lists(cls, countries: Iterable[str], languages: Iterable[str], operating_systems: Iterable[str]):
        return cls(tuple(countries), tuple(languages), tuple(operating_systems))

    def get_countries(self) -> Tuple[str, ...]:
        return self.countries

    def get_languages(self) -> Tuple[str, ...]:
        return self.languages

    def get_operating_systems(self) -> Tuple[str, ...]:
        return self.operating_systems


def load_form_options(environ: Optional[Mapping[str, str]] = None, strict: Optional[bool] = None) -> FormOptions:
    """Read the three option lists once, at startup.

    A missing key degrades to an empty list unless strict mode is on, in which
    case ConfigurationError is raised.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ
    if strict is None:
        strict = environ.get(STRICT_KEY, "").strip().lower() in TRUTHY

    missing = [key for key in (COUNTRIES_KEY, LANGUAGES_KEY, OPERATING_SYSTEMS_KEY) if key not in environ]
    if missing:
        if strict:
            raise ConfigurationError(f"Missing form option keys: {', '.join(missing)}")
        logger.warning(f"Form option keys not configured, using empty lists: {missing}")

    options = FormOptions(
        countries=parse_option_list(environ.get(COUNTRIES_KEY, "")),
        languages=parse_option_list(environ.get(LANGUAGES_KEY, "")),
        operating_systems=parse_option_list(environ.get(OPERATING_SYSTEMS_KEY, "")),
    )
    logger.info(
        f"Loaded form options: {len(options.countries)} countries, "
        f"{len(options.languages)} languages, {len(options.operating_systems)} operating systems"
    )
    return options
