import pytest
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from arthings.common.exceptions import Conflict
from arthings.ratings.models import Rating
from arthings.ratings.services import RatingService
from arthings.rentals.models import Rental

pytestmark = pytest.mark.django_db


@pytest.fixture
def completed_rental(item, renter, make_rental):
    return make_rental(item, renter, status=Rental.COMPLETED)


def test_both_parties_rate_each_other_once(owner, renter, completed_rental):
    first = RatingService.submit_rating(rater=owner, rental_id=completed_rental.id, to_user_id=renter.id, score=5)
    assert first.score == 5

    with pytest.raises(Conflict):
        RatingService.submit_rating(rater=owner, rental_id=completed_rental.id, to_user_id=renter.id, score=1)
    first.refresh_from_db()
    assert first.score == 5

    second = RatingService.submit_rating(
        rater=renter, rental_id=completed_rental.id, to_user_id=owner.id, score=4, comment="  Great tent  ",
    )
    assert second.comment == "Great tent"
    assert Rating.objects.count() == 2


def test_missing_rental(owner, renter):
    with pytest.raises(NotFound):
        RatingService.submit_rating(rater=owner, rental_id=999, to_user_id=renter.id, score=5)


@pytest.mark.parametrize("status", [Rental.PENDING, Rental.APPROVED, Rental.DECLINED, Rental.CANCELLED])
def test_rental_must_be_completed(owner, renter, item, make_rental, status):
    rental = make_rental(item, renter, status=status)
    with pytest.raises(ValidationError):
        RatingService.submit_rating(rater=owner, rental_id=rental.id, to_user_id=renter.id, score=5)


def test_third_party_cannot_rate(stranger, renter, completed_rental):
    with pytest.raises(PermissionDenied):
        RatingService.submit_rating(rater=stranger, rental_id=completed_rental.id, to_user_id=renter.id, score=3)


@pytest.mark.parametrize("rater_name, target_name", [("owner", "owner"), ("renter", "renter"), ("owner", "stranger")])
def test_wrong_target(request, completed_rental, rater_name, target_name):
    rater = request.getfixturevalue(rater_name)
    target = request.getfixturevalue(target_name)
    with pytest.raises(ValidationError):
        RatingService.submit_rating(rater=rater, rental_id=completed_rental.id, to_user_id=target.id, score=3)
    assert Rating.objects.count() == 0


def test_comment_is_cleaned_and_truncated(owner, renter, completed_rental):
    rating = RatingService.submit_rating(
        rater=owner, rental_id=completed_rental.id, to_user_id=renter.id, score=5,
        comment="<script>x</script>" + "a" * 1200,
    )
    assert "<script>" not in rating.comment
    assert len(rating.comment) == 1000


def test_blank_comment_stored_as_null(owner, renter, completed_rental):
    rating = RatingService.submit_rating(
        rater=owner, rental_id=completed_rental.id, to_user_id=renter.id, score=5, comment="   ",
    )
    assert rating.comment is None


@pytest.mark.parametrize("raw, expected", [(0, 1), (1, 1), (3, 3), (5, 5), (9, 5)])
def test_clamp_score(raw, expected):
    assert RatingService.clamp_score(raw) == expected


def test_can_rate_flags(owner, renter, stranger, completed_rental):
    before = RatingService.can_rate(completed_rental.id, renter)
    assert before["can_rate_owner"] is True
    assert before["can_rate_renter"] is False
    assert before["owner_id"] == owner.id
    assert before["renter_name"] == "Taras"

    RatingService.submit_rating(rater=renter, rental_id=completed_rental.id, to_user_id=owner.id, score=4)

    after = RatingService.can_rate(completed_rental.id, renter)
    assert after["can_rate_owner"] is False
    assert after["already_rated_owner"] is True

    owner_view = RatingService.can_rate(completed_rental.id, owner)
    assert owner_view["can_rate_renter"] is True
    assert owner_view["already_rated_renter"] is False

    outsider = RatingService.can_rate(completed_rental.id, stranger)
    assert not any(outsider[key] for key in ("can_rate_owner", "can_rate_renter"))


def test_can_rate_false_when_not_completed(owner, renter, item, make_rental):
    rental = make_rental(item, renter, status=Rental.APPROVED)
    flags = RatingService.can_rate(rental.id, owner)
    assert flags["can_rate_owner"] is False
    assert flags["can_rate_renter"] is False


def test_can_rate_missing_rental(owner):
    flags = RatingService.can_rate(999, owner)
    assert flags["can_rate_renter"] is False
    assert flags["owner_id"] is None


def test_user_summary(owner, renter, item, make_rental):
    for score in (5, 4, 4):
        rental = make_rental(item, renter, status=Rental.COMPLETED)
        RatingService.submit_rating(rater=renter, rental_id=rental.id, to_user_id=owner.id, score=score)

    summary = RatingService.user_summary(owner.id)

    assert summary["total_count"] == 3
    assert summary["average_score"] == 4.3
    assert len(summary["ratings"]) == 3


def test_user_summary_without_ratings(renter):
    summary = RatingService.user_summary(renter.id)
    assert summary["average_score"] is None
    assert summary["total_count"] == 0
