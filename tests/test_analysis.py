"""Integration-style tests for the /api endpoints with fake external clients."""

from __future__ import annotations

import errno
import random
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from truth_machine.config.settings import OpenAIConfig, Settings, UploadConfig
from truth_machine.controllers.dependencies import get_analysis_service, get_challenge_rng
from truth_machine.main import create_app
from truth_machine.pipelines.analysis import AnalysisService
from truth_machine.services.challenges import get_challenge
from truth_machine.services.prompt_builder import SYSTEM_PROMPT
from truth_machine.services.transcribe import TranscriptionError, TranscriptionResult

STANDARD_REPLY = (
    "VERDICT: DECEPTION\n"
    "CONFIDENCE: 87%\n"
    "🎯 THE BREAKDOWN:\nThey paused oddly.\n"
    "🔍 SUSPICIOUS SIGNALS:\nFiller words.\n"
    "💡 THE VERDICT EXPLAINED:\nBusted!"
)

PARTY_REPLY = (
    "```json\n"
    '{"verdict":"TRUTH","confidence":91,"scores":{"deception":7.2,"conviction":8.8,'
    '"creativity":6.1,"detail":9.0,"entertainment":8.4},"totalScore":39.5,'
    '"breakdown":"Solid.","signals":"None.","judgment":"Believable!","tip":"Blink less."}\n'
    "```"
)


class FakeTranscriber:
    def __init__(self, *, text: str = "I was home all night, honestly.", duration: float = 4.0, error: Exception | None = None):
        self.text = text
        self.duration = duration
        self.error = error
        self.seen_paths: list[Path] = []

    async def transcribe(self, audio_path: Path) -> TranscriptionResult:
        self.seen_paths.append(audio_path)
        assert audio_path.exists()
        if self.error is not None:
            raise self.error
        return TranscriptionResult(text=self.text, duration=self.duration)


class FakeChatClient:
    def __init__(self, *, reply: str | None = STANDARD_REPLY, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def invoke(self, *, system_prompt, user_prompt, max_tokens=None, temperature=None, model=None):
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


def _settings(tmp_path: Path, *, api_key: str | None = "sk-test", max_bytes: int = 1024) -> Settings:
    return Settings(
        openai=OpenAIConfig(api_key=api_key),
        uploads=UploadConfig(dir=str(tmp_path / "uploads"), max_bytes=max_bytes),
        log_file=str(tmp_path / "logs" / "app.log"),
        pipeline_log_file=str(tmp_path / "logs" / "pipeline.log"),
        transcript_log_file=str(tmp_path / "logs" / "transcripts.log"),
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return _settings(tmp_path)


@pytest.fixture
def upload_dir(settings: Settings) -> Path:
    return Path(settings.uploads.dir)


def _client_with(settings: Settings, transcriber: FakeTranscriber, chat: FakeChatClient) -> TestClient:
    app = create_app(settings)
    service = AnalysisService(settings, transcriber=transcriber, llm_client=chat)
    app.dependency_overrides[get_analysis_service] = lambda: service
    return TestClient(app)


def _post_audio(client: TestClient, *, mode: str = "free", prompt: str | None = None, audio: bytes = b"fake-webm-bytes"):
    data = {"mode": mode}
    if prompt is not None:
        data["prompt"] = prompt
    return client.post(
        "/api/analyze",
        data=data,
        files={"audio": ("recording.webm", audio, "audio/webm")},
    )


def test_health_check(settings: Settings):
    client = TestClient(create_app(settings))

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Lie Detector is ready!"}


def test_challenge_uses_injected_random_source(settings: Settings):
    app = create_app(settings)
    app.dependency_overrides[get_challenge_rng] = lambda: random.Random(42)
    client = TestClient(app)

    response = client.get("/api/challenge")

    expected = get_challenge(random.Random(42))
    assert response.status_code == 200
    payload = response.json()
    assert payload["type"] == expected.type
    assert payload["title"] == expected.title
    assert payload.get("question") == expected.question
    assert payload.get("followUp") == expected.follow_up


def test_analyze_free_mode_returns_parsed_verdict(settings: Settings, upload_dir: Path):
    """Happy path: transcript, duration and parsed sections come back together."""

    transcriber = FakeTranscriber()
    chat = FakeChatClient()
    client = _client_with(settings, transcriber, chat)

    response = _post_audio(client, prompt="Where were you last Saturday night at 10pm?")

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["transcript"] == "I was home all night, honestly."
    assert payload["duration"] == 4.0
    assert payload["verdict"] == "DECEPTION"
    assert payload["confidence"] == 87
    assert payload["breakdown"] == "They paused oddly."
    assert payload["signals"] == "Filler words."
    assert payload["explanation"] == "Busted!"
    assert payload["scores"] is None
    assert payload["totalScore"] is None
    assert payload["tip"] == ""
    assert payload["raw"] == STANDARD_REPLY

    call = chat.calls[0]
    assert call["system_prompt"] == SYSTEM_PROMPT
    assert call["temperature"] == 0.8
    assert call["max_tokens"] == 1000
    assert "Where were you last Saturday night at 10pm?" in call["user_prompt"]

    assert transcriber.seen_paths[0].suffix == ".webm"
    assert not transcriber.seen_paths[0].exists()
    assert list(upload_dir.iterdir()) == []


def test_analyze_party_mode_parses_json_scorecard(settings: Settings):
    chat = FakeChatClient(reply=PARTY_REPLY)
    client = _client_with(settings, FakeTranscriber(), chat)

    response = _post_audio(client, mode="party")

    assert response.status_code == 200
    payload = response.json()
    assert payload["verdict"] == "TRUTH"
    assert payload["confidence"] == 91
    assert payload["scores"]["creativity"] == 6.1
    assert payload["totalScore"] == 39.5
    assert payload["explanation"] == "Believable!"
    assert payload["tip"] == "Blink less."
    assert '"totalScore"' in chat.calls[0]["user_prompt"]


def test_analyze_without_audio_returns_bad_request(settings: Settings):
    client = _client_with(settings, FakeTranscriber(), FakeChatClient())

    response = client.post("/api/analyze", data={"mode": "free"})

    assert response.status_code == 400
    assert response.json() == {"error": "No audio file provided"}


def test_analyze_with_text_audio_field_returns_bad_request(settings: Settings, upload_dir: Path):
    transcriber = FakeTranscriber()
    client = _client_with(settings, transcriber, FakeChatClient())

    response = client.post("/api/analyze", data={"mode": "free", "audio": "not-a-file"})

    assert response.status_code == 400
    assert response.json() == {"error": "No audio file provided"}
    assert transcriber.seen_paths == []
    assert not upload_dir.exists()


def test_analyze_without_credential_leaves_uploads_untouched(tmp_path: Path):
    settings = _settings(tmp_path, api_key=None)
    client = TestClient(create_app(settings))

    response = _post_audio(client)

    assert response.status_code == 500
    payload = response.json()
    assert payload["error"] == "API not configured"
    assert "OPENAI_API_KEY" in payload["message"]
    assert not Path(settings.uploads.dir).exists()


def test_transcription_failure_is_reported_and_audio_deleted(settings: Settings, upload_dir: Path):
    transcriber = FakeTranscriber(error=TranscriptionError("quota exceeded"))
    chat = FakeChatClient()
    client = _client_with(settings, transcriber, chat)

    response = _post_audio(client)

    assert response.status_code == 500
    assert response.json() == {"error": "Analysis failed", "message": "quota exceeded"}
    assert chat.calls == []
    assert not transcriber.seen_paths[0].exists()
    assert list(upload_dir.iterdir()) == []


def test_generation_failure_passes_upstream_message(settings: Settings, upload_dir: Path):
    client = _client_with(settings, FakeTranscriber(), FakeChatClient(error=RuntimeError("model overloaded")))

    response = _post_audio(client)

    assert response.status_code == 500
    assert response.json() == {"error": "Analysis failed", "message": "model overloaded"}
    assert list(upload_dir.iterdir()) == []


def test_oversized_audio_is_rejected_before_processing(settings: Settings, upload_dir: Path):
    transcriber = FakeTranscriber()
    client = _client_with(settings, transcriber, FakeChatClient())

    response = _post_audio(client, audio=b"x" * 2048)

    assert response.status_code == 400
    assert response.json()["error"] == "Audio file too large"
    assert transcriber.seen_paths == []
    assert not upload_dir.exists()


def test_startup_purges_stale_uploads(settings: Settings, upload_dir: Path):
    upload_dir.mkdir(parents=True)
    stale = upload_dir / "audio_1.webm"
    stale.write_bytes(b"left over")

    with TestClient(create_app(settings)) as client:
        assert client.get("/api/health").status_code == 200

    assert upload_dir.exists()
    assert not stale.exists()


def test_service_without_credential_is_not_configured(tmp_path: Path):
    service = AnalysisService.from_settings(_settings(tmp_path, api_key=None))

    assert service.configured is False


def test_failed_write_leaves_no_partial_upload(settings: Settings, upload_dir: Path, monkeypatch: pytest.MonkeyPatch):
    original_write = Path.write_bytes

    def write_then_fail(self: Path, data: bytes) -> int:
        original_write(self, data[:4])
        raise OSError(errno.ENOSPC, "No space left on device")

    monkeypatch.setattr(Path, "write_bytes", write_then_fail)
    transcriber = FakeTranscriber()
    client = _client_with(settings, transcriber, FakeChatClient())

    response = _post_audio(client)

    assert response.status_code == 500
    assert response.json()["error"] == "Analysis failed"
    assert "No space left on device" in response.json()["message"]
    assert transcriber.seen_paths == []
    assert list(upload_dir.iterdir()) == []
