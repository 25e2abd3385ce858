import json

import pytest

from julaaz.cli import main


def test_badge_command(capsys):
    code = main([
        "badge", "handyman",
        "-m", "servicesRendered=160",
        "-m", "companyRevenueNgn=2100000",
        "-m", "averageRating=4.72",
    ])
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert out["tier"]["label"] == "Gold"
    assert out["next_tier"]["label"] == "Platinum"


def test_badge_command_with_targets(capsys):
    code = main([
        "badge", "homerunner",
        "-m", "viewingsHosted=1", "-m", "inspectionsCompleted=1",
        "-m", "conversionRate=1", "-m", "averageRating=1",
        "-t", "viewingsHosted=1", "-t", "inspectionsCompleted=1",
        "-t", "conversionRate=1", "-t", "averageRating=1",
    ])
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert out["score"] == 4
    assert out["tier"]["id"] == "silver"


def test_missing_metric_fails():
    assert main(["badge", "handyman", "-m", "servicesRendered=1"]) == 1


def test_unsorted_targets_fail():
    code = main([
        "badge", "handyman",
        "-m", "servicesRendered=1", "-m", "companyRevenueNgn=1", "-m", "averageRating=1",
        "-t", "servicesRendered=3,2,1", "-t", "companyRevenueNgn=1", "-t", "averageRating=1",
    ])
    assert code == 1


def test_tiers_command(capsys):
    assert main(["tiers", "homerunner"]) == 0
    assert json.loads(capsys.readouterr().out)["role"] == "homerunner"


def test_malformed_metric_argument():
    with pytest.raises(SystemExit):
        main(["badge", "handyman", "-m", "servicesRendered"])
