from dataclasses import dataclass, field
from typing import List

from config import MAX_PHOTOS, MAX_RATING, MIN_REVIEWERS


@dataclass
class Author:
    name: str = ""
    profile_link: str = ""
    avatar_url: str = ""

    def to_dict(self):
        return {
            "name": self.name,
            "profileLink": self.profile_link,
            "avatarUrl": self.avatar_url,
        }


@dataclass
class ImageRecord:
    url: str
    author: Author

    def __post_init__(self):
        if not self.url:
            raise ValueError("image url must not be empty")
        if not self.author.name:
            raise ValueError(f"image {self.url} has no author name")

    def to_dict(self):
        return {"url": self.url, "author": self.author.to_dict()}


@dataclass
class PlaceRecord:
    """A place listing. `link` is the identity used for deduplication."""

    title: str
    rating: float
    reviewer_count: int
    link: str
    region: str
    about: str = ""
    address: str = ""
    images: List[ImageRecord] = field(default_factory=list)

    def __post_init__(self):
        if not 0 <= self.rating <= MAX_RATING:
            raise ValueError(f"{self.title!r} has rating {self.rating}, expected 0-{MAX_RATING}")
        if self.reviewer_count < MIN_REVIEWERS:
            raise ValueError(
                f"{self.title!r} has {self.reviewer_count} reviewers, minimum is {MIN_REVIEWERS}"
            )
        if len(self.images) > MAX_PHOTOS:
            raise ValueError(f"{self.title!r} has {len(self.images)} images, maximum is {MAX_PHOTOS}")

    def to_dict(self):
        return {
            "title": self.title,
            "about": self.about,
            "address": self.address,
            "rating": self.rating,
            "reviewerCount": self.reviewer_count,
            "link": self.link,
            "region": self.region,
            "images": [image.to_dict() for image in self.images],
        }
