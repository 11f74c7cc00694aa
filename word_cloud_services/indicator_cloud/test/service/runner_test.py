""" Command line runner test cases
"""
import sys

import pytest
from word_cloud_services import run_indicator_clouds


@pytest.fixture
def runs(monkeypatch):
    runs = []

    async def fake_run_clouds(app_config, cloud_names=None, logger=None):
        runs.append(cloud_names)
        return {}

    monkeypatch.setattr(run_indicator_clouds, "run_clouds", fake_run_clouds)
    return runs


def test_main_reads_argv_when_called(runs, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["run_indicator_clouds", "female", "male"])
    run_indicator_clouds.main()
    run_indicator_clouds.main([])

    assert runs == [["female", "male"], None]


def test_main_with_explicit_cloud_names(runs):
    run_indicator_clouds.main(["verbs"])
    assert runs == [["verbs"]]
