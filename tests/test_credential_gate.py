from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pytest

from securepad.auth import CredentialError, CredentialGate, hash_password
from securepad.storage import CredentialStore


class ScriptedPrompt:
    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, message: str) -> str:
        self.prompts.append(message)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


def make_gate(
    tmp_path: Path, answers: Iterable[str], **kwargs
) -> tuple[CredentialGate, ScriptedPrompt, List[str]]:
    prompt = ScriptedPrompt(answers)
    output: List[str] = []
    gate = CredentialGate(
        CredentialStore(tmp_path / ".securepad_pass"),
        prompt=prompt,
        echo=output.append,
        **kwargs,
    )
    return gate, prompt, output


def test_hash_password_is_sha256_hex() -> None:
    assert hash_password("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_first_run_stores_hash_and_proceeds(tmp_path: Path) -> None:
    gate, _, output = make_gate(tmp_path, ["secret", "secret"])

    assert gate.run() is True

    assert gate.store.load_hash() == hash_password("secret")
    assert output[-1] == "Password created successfully!"


def test_setup_retries_on_empty_and_mismatch(tmp_path: Path) -> None:
    gate, prompt, output = make_gate(
        tmp_path, ["  ", "one", "two", "final", "final"]
    )

    gate.setup()

    assert "Password cannot be empty. Please try again." in output
    assert "Passwords do not match. Please try again." in output
    assert gate.store.load_hash() == hash_password("final")
    assert len(prompt.prompts) == 5


def test_setup_gives_up_after_attempt_limit(tmp_path: Path) -> None:
    gate, _, _ = make_gate(tmp_path, ["a", "b", "c", "d"], max_setup_attempts=2)

    with pytest.raises(CredentialError):
        gate.setup()

    assert gate.store.exists() is False


def test_verify_accepts_matching_password(tmp_path: Path) -> None:
    gate, _, _ = make_gate(tmp_path, ["secret"])
    gate.store.save_hash(hash_password("secret"))

    assert gate.run() is True


def test_verify_rejects_wrong_password(tmp_path: Path) -> None:
    gate, _, _ = make_gate(tmp_path, ["guess"])
    gate.store.save_hash(hash_password("secret"))

    assert gate.run() is False


def test_aborted_prompt_raises_credential_error(tmp_path: Path) -> None:
    gate, _, _ = make_gate(tmp_path, [])
    gate.store.save_hash(hash_password("secret"))

    with pytest.raises(CredentialError):
        gate.run()


def test_undecodable_hash_file_is_rejected(tmp_path: Path) -> None:
    gate, _, output = make_gate(tmp_path, ["secret"])
    gate.store.path.write_bytes(b"\xff\xfe\x00garbage")

    assert gate.run() is False

    assert output[-1].startswith("Error loading password")


def test_non_ascii_hash_file_is_a_mismatch(tmp_path: Path) -> None:
    gate, _, _ = make_gate(tmp_path, ["secret"])
    gate.store.path.write_text("café", encoding="utf-8")

    assert gate.run() is False
