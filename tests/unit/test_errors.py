"""
エラー定義のユニットテスト

エラー分類と復旧可否の検証
"""

import logging
import unittest

from convex_clerk.errors import (
    ConvexClerkException,
    ErrorCode,
    NoActiveSessionError,
    ProviderNotReadyError,
    SignInTimeoutError,
    TokenRetrievalFailedError,
    create_auth_error,
)
from convex_clerk.models import AuthOutcome, AuthState


class TestErrorCode(unittest.TestCase):
    """ErrorCode列挙型のテスト"""

    def test_codes(self):
        self.assertEqual(ErrorCode.AUTH_PROVIDER_NOT_READY.value, "AUTH_001")
        self.assertEqual(ErrorCode.AUTH_NO_ACTIVE_SESSION.value, "AUTH_002")
        self.assertEqual(ErrorCode.AUTH_TOKEN_RETRIEVAL_FAILED.value, "AUTH_003")
        self.assertEqual(ErrorCode.AUTH_SIGN_IN_TIMEOUT.value, "AUTH_004")


class TestAuthExceptions(unittest.TestCase):
    """例外クラスのテスト"""

    def test_message_includes_code(self):
        exc = ProviderNotReadyError()
        self.assertTrue(str(exc).startswith("[AUTH_001]"))
        self.assertIsInstance(exc, ConvexClerkException)

    def test_recoverable_flags(self):
        """設定起因のトークン失敗のみ復旧不可"""
        self.assertTrue(ProviderNotReadyError().recoverable)
        self.assertTrue(NoActiveSessionError().recoverable)
        self.assertTrue(SignInTimeoutError(1.0).recoverable)
        self.assertFalse(TokenRetrievalFailedError("x").recoverable)

    def test_no_active_session_is_informational(self):
        self.assertEqual(NoActiveSessionError().log_level, logging.INFO)
        self.assertEqual(TokenRetrievalFailedError("x").log_level, logging.ERROR)

    def test_token_failure_keeps_reason(self):
        exc = TokenRetrievalFailedError("empty token for template convex")
        self.assertEqual(exc.reason, "empty token for template convex")
        self.assertEqual(exc.error.details, {"reason": "empty token for template convex"})
        self.assertIn("empty token for template convex", str(exc))

    def test_timeout_details(self):
        self.assertEqual(SignInTimeoutError(2.5).error.details, {"timeout": 2.5})
        self.assertIsNone(SignInTimeoutError().error.details)

    def test_create_auth_error_explicit_log_level(self):
        error = create_auth_error(ErrorCode.AUTH_SIGN_IN_TIMEOUT, "m", log_level=logging.DEBUG)
        self.assertEqual(error.log_level, logging.DEBUG)
        self.assertEqual(error.code, "AUTH_004")


class TestAuthOutcome(unittest.TestCase):
    """例外から分類への変換"""

    def test_from_exception(self):
        cases = [
            (ProviderNotReadyError(), AuthOutcome.PROVIDER_NOT_READY),
            (NoActiveSessionError(), AuthOutcome.NO_SESSION),
            (TokenRetrievalFailedError("x"), AuthOutcome.TOKEN_FAILURE),
            (SignInTimeoutError(), AuthOutcome.TIMEOUT),
        ]
        for exc, expected in cases:
            with self.subTest(exc=type(exc).__name__):
                self.assertIs(AuthOutcome.from_exception(exc), expected)

    def test_unknown_exception_type(self):
        with self.assertRaises(TypeError):
            AuthOutcome.from_exception(RuntimeError("boom"))

    def test_auth_state(self):
        self.assertIs(AuthOutcome.SUCCESS.auth_state, AuthState.AUTHENTICATED)
        self.assertIs(AuthOutcome.NO_SESSION.auth_state, AuthState.UNAUTHENTICATED)
        self.assertIs(AuthOutcome.TIMEOUT.auth_state, AuthState.UNAUTHENTICATED)


if __name__ == "__main__":
    unittest.main()
