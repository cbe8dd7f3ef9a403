from dataclasses import replace

import pytest

from models import Author, ImageRecord
from fakes import make_place


def test_reviewer_minimum_is_enforced():
    with pytest.raises(ValueError):
        make_place(reviewers=9)

    assert make_place(reviewers=10).reviewer_count == 10


def test_image_requires_url_and_author_name():
    with pytest.raises(ValueError):
        ImageRecord(url="", author=Author(name="Budi"))
    with pytest.raises(ValueError):
        ImageRecord(url="https://x/p=s1080-k-no", author=Author())


def test_at_most_five_images():
    images = [ImageRecord(url=f"https://x/{i}=s1080-k-no", author=Author(name="Budi")) for i in range(6)]
    place = make_place()

    with pytest.raises(ValueError):
        replace(place, images=images)

    assert len(replace(place, images=images[:5]).images) == 5


def test_to_dict_uses_persisted_keys():
    place = make_place(
        about="Air terjun di kaki Gunung Sanggabuana",
        images=[ImageRecord(
            url="https://x/p=s1080-k-no",
            author=Author(name="Budi", profile_link="https://maps/contrib/1", avatar_url="https://a/1"),
        )],
    )

    data = place.to_dict()

    assert set(data) == {"title", "about", "address", "rating", "reviewerCount", "link", "region", "images"}
    assert data["reviewerCount"] == 120
    assert data["images"][0] == {
        "url": "https://x/p=s1080-k-no",
        "author": {"name": "Budi", "profileLink": "https://maps/contrib/1", "avatarUrl": "https://a/1"},
    }
    assert data["about"] == "Air terjun di kaki Gunung Sanggabuana"
    assert data["address"] == ""


@pytest.mark.parametrize("rating", [-0.1, 5.1, 7.5])
def test_rating_outside_star_scale_is_rejected(rating):
    with pytest.raises(ValueError):
        make_place(rating=rating)


@pytest.mark.parametrize("rating", [0.0, 1.0, 5.0])
def test_rating_bounds_are_inclusive(rating):
    assert make_place(rating=rating).rating == rating
