from unittest.mock import MagicMock

import pytest

from storefront_api.infrastructure.common.retry import RetryPolicy


class Flaky(Exception):
    pass


def test_retries_retryable_errors_until_success():
    fn = MagicMock(side_effect=[Flaky(), Flaky(), "done"])
    policy = RetryPolicy(
        max_attempts=3, is_retryable=lambda e: isinstance(e, Flaky), initial_wait=0, max_wait=0
    )

    assert policy.run(fn) == "done"
    assert fn.call_count == 3


def test_reraises_last_error_when_attempts_run_out():
    fn = MagicMock(side_effect=Flaky("still failing"))
    policy = RetryPolicy(max_attempts=2, is_retryable=lambda e: True, initial_wait=0, max_wait=0)

    with pytest.raises(Flaky):
        policy.run(fn)
    assert fn.call_count == 2


def test_default_policy_fails_fast():
    fn = MagicMock(side_effect=ValueError("nope"))

    with pytest.raises(ValueError):
        RetryPolicy(max_attempts=5).run(fn)
    assert fn.call_count == 1
