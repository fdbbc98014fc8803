"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """
        Get input from the user with a prompt.

        Raises EOFError when no more input is available.
        """
        pass

    def read_token(self, prompt: str) -> str:
        """
        Read one line and return its first whitespace-delimited token.

        An empty line yields an empty string.
        """
        tokens = self.input(prompt).split()
        return tokens[0] if tokens else ""


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    Methods
    -------
    def output(self, message: str):
        Output a message to the console.

    def input(self, prompt: str):
        Get input from the console.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    replays queued input responses.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next queued response.

    def add_input(self, *responses):
        Queue input responses.
    """

    __test__ = False

    def __init__(self, input_responses: Optional[List[str]] = None):
        self.sent_messages: List[str] = []
        self.prompts: List[str] = []
        self.input_responses: List[str] = list(input_responses or [])

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise EOFError("No more input responses left in TestIOInterface queue.")

    def add_input(self, *responses: str) -> None:
        """Queue input responses."""
        self.input_responses.extend(responses)

    @property
    def transcript(self) -> str:
        return "\n".join(self.sent_messages)


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Passes everything through
    to a wrapped interface and appends each output message and each answered
    prompt to a transcript file.
    """

    def __init__(self, io_interface: IOInterface, log_file_path: str):
        self.io_interface = io_interface
        self.log_file_path = log_file_path

    def _write(self, line: str) -> None:
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(line + "\n")

    def output(self, message: str) -> None:
        """Output a message and write it to the log file."""
        self.io_interface.output(message)
        self._write(message)

    def input(self, prompt: str) -> str:
        """Read from the wrapped interface and log the prompt with its answer."""
        response = self.io_interface.input(prompt)
        self._write(f"[INPUT] {prompt}{response}")
        return response
