from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

from ..errors import InvalidSiteConfig
from .records import GeoLocation

DEFAULT_SITE_PATH = Path(__file__).parent.parent / "config" / "site.yaml"


class SiteConfig(BaseModel):
  latitude: float = Field(ge=-90.0, le=90.0)
  longitude: float = Field(ge=-180.0, le=180.0)
  zenith: float = -0.83
  utc_offset: int = Field(default=1, ge=-12, le=14)
  leap_rule: Literal["gregorian", "literal"] = "gregorian"

  def location(self) -> GeoLocation:
    return GeoLocation(latitude=self.latitude, longitude=self.longitude)


def _read_mapping(path: Path) -> dict:
  data = yaml.safe_load(path.read_text(encoding="utf-8"))
  if data is None:
    return {}
  if not isinstance(data, dict):
    raise InvalidSiteConfig(f"Site config {path} must be a mapping, got {type(data).__name__}")
  return data


def load_site_config(path: Optional[str] = None, **overrides) -> SiteConfig:
  """
  Packaged defaults, then the YAML file at ``path``, then any non-None
  keyword overrides.
  """
  data = _read_mapping(DEFAULT_SITE_PATH)
  if path:
    data.update(_read_mapping(Path(path)))
  data.update({k: v for k, v in overrides.items() if v is not None})
  return SiteConfig(**data)
