"""Masked password acquisition with confirmation."""

from __future__ import annotations

import logging

from provisioner.core.errors import MismatchError
from provisioner.services.terminal import Terminal

logger = logging.getLogger(__name__)

MASK_CHAR = "*"
_SUBMIT_CHARS = frozenset({"\n", "\r", "\x04"})
_ERASE_CHARS = frozenset({"\x08", "\x7f"})
_INTERRUPT_CHAR = "\x03"
_CLEAR_LINE = "\r\x1b[K"


class SecretEntryPort:
    """Obtains a plaintext password from arguments or from masked prompts."""

    def __init__(
        self,
        terminal: Terminal,
        *,
        prompt: str = "Password: ",
        confirm_prompt: str = "Confirm Password: ",
        mask: str = MASK_CHAR,
    ) -> None:
        self._terminal = terminal
        self._prompt = prompt
        self._confirm_prompt = confirm_prompt
        self._mask = mask

    def acquire(self, non_interactive_value: str | None = None) -> str:
        """Return a pre-supplied secret as-is, otherwise prompt until both entries match."""

        if non_interactive_value:
            return non_interactive_value

        while True:
            try:
                return self._read_confirmed()
            except MismatchError as exc:
                logger.error(exc.message)

    def _read_confirmed(self) -> str:
        secret = self.read_masked(self._prompt)
        confirmation = self.read_masked(self._confirm_prompt)
        if secret != confirmation:
            raise MismatchError()
        return secret

    def read_masked(self, prompt: str) -> str:
        """Read one entry, echoing the mask character for each keystroke."""

        self._terminal.write(prompt)
        buffer: list[str] = []
        try:
            with self._terminal.raw_mode():
                while True:
                    char = self._terminal.read_char()
                    if char == "" or char in _SUBMIT_CHARS:
                        break
                    if char == _INTERRUPT_CHAR:
                        raise KeyboardInterrupt
                    if char in _ERASE_CHARS:
                        if buffer:
                            buffer.pop()
                        self._terminal.write(_CLEAR_LINE + prompt + self._mask * len(buffer))
                        continue
                    buffer.append(char)
                    self._terminal.write(self._mask)
        finally:
            self._terminal.write("\n")
        return "".join(buffer)
