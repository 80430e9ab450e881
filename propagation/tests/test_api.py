"""HTTP tests for the flow endpoints and the error boundary."""

import logging
import unittest

from fastapi.testclient import TestClient

from propagation.core.config import AppSettings
from propagation.main import create_app
from propagation.services import PropagationService


class FlowApiTests(unittest.TestCase):
    """Exercise the flows through the FastAPI application."""

    def setUp(self) -> None:
        settings = AppSettings(
            app_name="Propagation Test API",
            debug=False,
            host="127.0.0.1",
            port=8000,
            log_level=logging.INFO,
        )
        self.service_logger = logging.getLogger("propagation.tests.api")
        app = create_app(settings=settings, service=PropagationService(logger=self.service_logger))
        self.client = TestClient(app)

    def test_health(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok", "app_name": "Propagation Test API"})

    def test_catch_flow_is_handled(self) -> None:
        with self.assertLogs(self.service_logger, level="INFO") as captured:
            response = self.client.get("/flows/catch")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"flow": "catch", "outcome": "handled"})
        self.assertEqual(len(captured.records), 1)

    def test_throw_flow_reaches_error_handler(self) -> None:
        with self.assertLogs("propagation.api.router", level="ERROR"):
            response = self.client.get("/flows/throw")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "UncheckedError", "message": "ex"})


if __name__ == "__main__":
    unittest.main()
