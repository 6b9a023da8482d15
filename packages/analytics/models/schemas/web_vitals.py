"""Schema for web-vitals beacons."""

from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WebVitalsMetric(BaseModel):
    """A single Core Web Vitals measurement (CLS, FCP, INP, LCP, TTFB)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    name: Optional[str] = None
    id: Optional[str] = None
    value: Optional[float] = None
    rating: Optional[str] = None
    delta: Optional[float] = None
    navigation_type: Optional[str] = None
