"""Tests for the command-line entry points."""

import json
from unittest.mock import AsyncMock

from blogfront.services.errors import PaginationProtocolViolation


async def test_slugs_writes_json(mock_settings, mocker, tmp_path):
    from scripts import slugs as slugs_script

    mocker.patch.object(
        slugs_script,
        "enumerate_all_slugs",
        new_callable=AsyncMock,
        return_value=["a", "b"],
    )
    out = tmp_path / "slugs.json"

    code = await slugs_script.main(["--output", str(out), "--batch-size", "50"])

    assert code == 0
    assert json.loads(out.read_text()) == ["a", "b"]
    slugs_script.enumerate_all_slugs.assert_awaited_once_with(50, None)


async def test_slugs_via_app(mock_settings, mocker, capsys):
    from scripts import slugs as slugs_script

    mocker.patch.object(
        slugs_script.app_api,
        "fetch_all_slugs",
        new_callable=AsyncMock,
        return_value=["x"],
    )

    code = await slugs_script.main(["--via-app"])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == ["x"]


async def test_slugs_failure_exits_nonzero(mock_settings, mocker):
    from scripts import slugs as slugs_script

    mocker.patch.object(
        slugs_script,
        "enumerate_all_slugs",
        new_callable=AsyncMock,
        side_effect=PaginationProtocolViolation("stalled"),
    )

    assert await slugs_script.main([]) == 1
