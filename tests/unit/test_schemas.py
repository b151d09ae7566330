"""Unit tests for response schemas built from ORM rows."""

from skin_museum.kernel.models import ReviewRating, SkinReview
from skin_museum.schemas.skin import ReviewResponse


def test_review_rating_from_stored_string():
    review = SkinReview(skin_md5="0" * 32, review="NSFW", reviewer="mod")

    response = ReviewResponse.from_model(review)

    assert response.rating == ReviewRating.NSFW.value
    assert response.reviewer == "mod"


def test_review_rating_from_enum_member():
    review = SkinReview(skin_md5="0" * 32, review=ReviewRating.APPROVED)

    assert ReviewResponse.from_model(review).rating == "APPROVED"
