import pytest

from julaaz.badges import UnsortedThresholdsError
from julaaz.services.badge_service import BadgeService
from julaaz.utils.system.errors import NotFoundError, ValidationError

HANDYMAN_METRICS = {"servicesRendered": 160, "companyRevenueNgn": 2_100_000, "averageRating": 4.72}


def test_compute_returns_serialized_result():
    result = BadgeService.compute("handyman", HANDYMAN_METRICS)

    assert result["role"] == "handyman"
    assert result["score"] == 6
    assert result["tier"]["id"] == "gold"
    assert result["next_tier"]["id"] == "platinum"
    assert result["progress"][1]["unit"] == "₦"


def test_compute_accepts_numeric_strings():
    metrics = {k: str(v) for k, v in HANDYMAN_METRICS.items()}
    assert BadgeService.compute("handyman", metrics)["score"] == 6


def test_compute_with_target_override():
    targets = {"servicesRendered": [1], "companyRevenueNgn": [1], "averageRating": [1]}
    result = BadgeService.compute("handyman", HANDYMAN_METRICS, targets)
    assert result["total_possible"] == 3
    assert result["tier"]["id"] == "silver"


def test_unknown_role():
    with pytest.raises(NotFoundError):
        BadgeService.compute("tenant", {})


@pytest.mark.parametrize("metrics", [
    None,
    {"servicesRendered": 1},
    {**HANDYMAN_METRICS, "averageRating": "excellent"},
    {**HANDYMAN_METRICS, "averageRating": True},
])
def test_invalid_metrics(metrics):
    with pytest.raises(ValidationError):
        BadgeService.compute("handyman", metrics)


@pytest.mark.parametrize("value", ["nan", "inf", "-Infinity", float("nan")])
def test_non_finite_metrics_rejected(value):
    with pytest.raises(ValidationError):
        BadgeService.compute("handyman", {**HANDYMAN_METRICS, "averageRating": value})


def test_non_finite_targets_rejected():
    targets = {"servicesRendered": [50, "inf"], "companyRevenueNgn": [1], "averageRating": [1]}
    with pytest.raises(ValidationError):
        BadgeService.compute("handyman", HANDYMAN_METRICS, targets)


def test_unknown_target_key():
    with pytest.raises(ValidationError):
        BadgeService.compute("handyman", HANDYMAN_METRICS, {"bogus": [1]})


def test_unsorted_targets_rejected():
    targets = {"servicesRendered": [300, 150, 50], "companyRevenueNgn": [1], "averageRating": [1]}
    with pytest.raises(UnsortedThresholdsError):
        BadgeService.compute("handyman", HANDYMAN_METRICS, targets)


def test_catalog_is_sorted_by_min_score():
    catalog = BadgeService.catalog("homerunner")
    assert [t["min_score"] for t in catalog["tiers"]] == [0, 4, 8, 10]
    assert catalog["thresholds"]["viewingsHosted"] == [10, 40, 100]
    assert catalog["metrics"][2] == {"key": "conversionRate", "label": "Conversion rate", "unit": "%"}
