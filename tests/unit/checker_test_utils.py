"""Helpers for building log message checkers and verifying messages."""

import unittest.mock
from unittest.mock import MagicMock

from log_message_linter.domain.classifier import LoggerClassifier
from log_message_linter.domain.config import RuleConfig
from log_message_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from log_message_linter.infrastructure.services.guidance_service import GuidanceService
from log_message_linter.use_cases.checks.log_messages import LogMessageChecker


def create_checker(config: RuleConfig | None = None, config_path: str = "") -> LogMessageChecker:
    """Create a LogMessageChecker on a mock linter with a fixed config."""
    linter = MagicMock()
    linter.config.log_message_config = config_path
    resolver = MagicMock()
    resolver.resolve.return_value = config or RuleConfig.default()
    checker = LogMessageChecker(
        linter,
        classifier=LoggerClassifier(AstroidGateway()),
        config_resolver=resolver,
        registry=GuidanceService().get_registry(),
    )
    checker.open()
    return checker


class CheckerTestCase:
    """Mixin for Checker tests."""

    def assertAddsMessage(self, checker, msg_id, node=None, args=None):
        """Verify that checker.add_message was called."""
        calls = checker.linter.add_message.call_args_list
        found: bool = False

        for call in calls:
            c_args, c_kwargs = call

            # Message id is positional 0
            if not (len(c_args) > 0 and c_args[0] == msg_id):
                continue

            # Node is positional 2 or kwarg
            actual_node = None
            if len(c_args) > 2:
                actual_node = c_args[2]
            elif 'node' in c_kwargs:
                actual_node = c_kwargs['node']
            if node is not None and actual_node is not node:
                continue

            # Args are positional 3 or kwarg
            actual_args = None
            if len(c_args) > 3:
                actual_args = c_args[3]
            elif 'args' in c_kwargs:
                actual_args = c_kwargs['args']
            if args is not None and args != unittest.mock.ANY and actual_args != args:
                continue

            found = True
            break

        if not found:
            raise AssertionError(f"Message {msg_id} not found in calls: {calls}")

    def assertNoMessages(self, checker):
        calls = checker.linter.add_message.call_args_list
        if calls:
            raise AssertionError(f"Expected no messages, but found: {calls}")

    def emitted_ids(self, checker) -> list[str]:
        return [call[0][0] for call in checker.linter.add_message.call_args_list]
