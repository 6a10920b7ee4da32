"""Static site settings: metadata, locale, logo and social links."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional

from .errors import InvalidArgument
from .log import get_logger

logger = get_logger(__name__)

DEFAULT_LANG = "en"


def _require_text(name: str, value: str) -> None:
    if not value or not value.strip():
        raise InvalidArgument(f"{name} must not be empty", argument=name)


@dataclass
class Site:
    website: str = "https://emmanueleboh.com/"
    author: str = "Emmanuel O. Eboh"
    desc: str = "Breaking down complex concepts into simple, concise form."
    title: str = "Emmanuel O. Eboh"
    og_image: str = "new-og.jpg"
    light_and_dark_mode: bool = True
    post_per_page: int = 5
    scheduled_post_margin: int = 15 * 60 * 1000  # ms

    @property
    def scheduled_post_margin_delta(self) -> timedelta:
        return timedelta(milliseconds=self.scheduled_post_margin)

    def validate(self) -> None:
        if not self.website.startswith(("http://", "https://")):
            raise InvalidArgument(
                f"website must be an http(s) URL, got {self.website!r}", argument="website"
            )
        _require_text("author", self.author)
        _require_text("title", self.title)
        if self.post_per_page < 1:
            raise InvalidArgument("post_per_page must be at least 1", argument="post_per_page")
        if self.scheduled_post_margin < 0:
            raise InvalidArgument(
                "scheduled_post_margin must not be negative", argument="scheduled_post_margin"
            )


@dataclass
class Locale:
    lang: str = DEFAULT_LANG
    # BCP 47 tags; empty means the environment default
    lang_tag: List[str] = field(default_factory=lambda: ["en-EN"])

    @property
    def html_lang(self) -> str:
        return self.lang or DEFAULT_LANG

    def validate(self) -> None:
        for tag in self.lang_tag:
            _require_text("lang_tag", tag)


@dataclass
class LogoImage:
    enable: bool = False
    svg: bool = True
    width: int = 216
    height: int = 46

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidArgument(
                f"logo dimensions must be positive, got {self.width}x{self.height}",
                argument="width" if self.width <= 0 else "height",
            )


@dataclass
class SocialLink:
    name: str
    href: str
    link_title: str
    active: bool = True

    def validate(self) -> None:
        _require_text("name", self.name)
        if not self.href.startswith(("http://", "https://", "mailto:")):
            raise InvalidArgument(
                f"{self.name} link must be http(s) or mailto, got {self.href!r}", argument="href"
            )


def build_socials(site: Site) -> List[SocialLink]:
    """Return the default social links, titled after *site*."""
    return [
        SocialLink("Github", "https://github.com/EOEboh", f"{site.title} on Github"),
        SocialLink(
            "LinkedIn",
            "https://www.linkedin.com/in/emmanuel-eboh/",
            f"{site.title} on LinkedIn",
        ),
        SocialLink(
            "Mail",
            "mailto:ecolejnr007@gmail.com",
            f"Send an email to {site.title}",
            active=False,
        ),
        SocialLink("Twitter", "https://twitter.com/eoeboh", f"{site.title} on Twitter"),
    ]


@dataclass
class SiteSettings:
    site: Site = field(default_factory=Site)
    locale: Locale = field(default_factory=Locale)
    logo_image: LogoImage = field(default_factory=LogoImage)
    socials: Optional[List[SocialLink]] = None

    def __post_init__(self) -> None:
        if self.socials is None:
            self.socials = build_socials(self.site)

    def active_socials(self) -> List[SocialLink]:
        return [link for link in self.socials if link.active]

    def validate(self) -> None:
        """Validate every section, raising InvalidArgument on the first problem."""
        self.site.validate()
        self.locale.validate()
        self.logo_image.validate()
        for link in self.socials:
            link.validate()
        logger.debug(
            "Validated settings for %s (%d social links, %d active)",
            self.site.website,
            len(self.socials),
            len(self.active_socials()),
        )


def default_settings() -> SiteSettings:
    settings = SiteSettings()
    settings.validate()
    return settings
