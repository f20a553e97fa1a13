"""Tests for scripts/generate_emojis.py."""
import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from emojigen.models.emoji import EmojiSize, EmojiStyle, GenerationResult

# Put scripts/ on the path so the script can be imported
_SCRIPTS_DIR = Path(__file__).parent.parent.parent / "scripts"
if str(_SCRIPTS_DIR) not in sys.path:
    sys.path.insert(0, str(_SCRIPTS_DIR))


# ---------------------------------------------------------------------------
# build_requests
# ---------------------------------------------------------------------------


class TestBuildRequests:
    def test_one_request_per_prompt(self) -> None:
        from generate_emojis import build_requests

        requests = build_requests(["a cat", "a dog"], "pixel", "animal", "large")

        assert [r.prompt for r in requests] == ["a cat", "a dog"]
        assert all(r.style == EmojiStyle.pixel for r in requests)
        assert all(r.size == EmojiSize.large for r in requests)
        assert all(r.category == "animal" for r in requests)


# ---------------------------------------------------------------------------
# run()
# ---------------------------------------------------------------------------


class TestRun:
    async def test_returns_camel_case_dicts(self) -> None:
        from generate_emojis import build_requests, run

        results = [GenerationResult.ok("https://cdn.test/a.png", 10), GenerationResult.failed("nope")]
        with patch(
            "emojigen.services.emoji.EmojiGenerationService.generate_batch",
            new=AsyncMock(return_value=results),
        ) as mock_batch:
            output = await run(build_requests(["a", "b"], "cartoon", "custom", "medium"), user_id="cli-user")

        assert output == [
            {"success": True, "imageUrl": "https://cdn.test/a.png", "generationTimeMs": 10.0},
            {"success": False, "error": "nope"},
        ]
        assert mock_batch.call_args.kwargs["caller_id"] == "cli-user"

    async def test_window_size_override(self) -> None:
        from generate_emojis import build_requests, run

        captured = {}

        async def fake_batch(self, requests, caller_id=None):  # type: ignore[no-untyped-def]
            captured["window_size"] = self.coordinator.window_size
            return [GenerationResult.ok("https://cdn.test/a.png")]

        with patch("emojigen.services.emoji.EmojiGenerationService.generate_batch", new=fake_batch):
            await run(build_requests(["a"], "cartoon", "custom", "medium"), window_size=1)

        assert captured["window_size"] == 1


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------


class TestMain:
    def test_dry_run_prints_enhanced_prompts(self, capsys: pytest.CaptureFixture[str]) -> None:
        from generate_emojis import main

        exit_code = main(["a cute cat", "--category", "animal", "--dry-run"])

        assert exit_code == 0
        prompts = json.loads(capsys.readouterr().out)
        assert len(prompts) == 1
        assert "cute animal, friendly expression" in prompts[0]

    def test_exit_code_reflects_failures(self, capsys: pytest.CaptureFixture[str]) -> None:
        from generate_emojis import main

        with patch(
            "generate_emojis.run",
            new=AsyncMock(return_value=[{"success": True, "imageUrl": "x"}, {"success": False, "error": "e"}]),
        ):
            exit_code = main(["a", "b"])

        assert exit_code == 1
        assert len(json.loads(capsys.readouterr().out)) == 2

    def test_rejects_unknown_style(self) -> None:
        from generate_emojis import main

        with pytest.raises(SystemExit):
            main(["a cat", "--style", "watercolor"])

    def test_rejects_zero_window_size(self) -> None:
        from generate_emojis import main

        with pytest.raises(SystemExit):
            main(["a cat", "--window-size", "0"])
