from django.core.exceptions import PermissionDenied, ValidationError as DjangoValidationError
from django.db import IntegrityError, OperationalError
from django.http import Http404
from django.test import TestCase

from rest_framework.exceptions import NotFound, ValidationError

from drf_flowchart.exception_handlers import flowchart_exception_handler
from drf_flowchart.objects import Error, ForeignKeyError, NotFoundError
from drf_flowchart.response import Response


class ExceptionHandlersTestCase(TestCase):

    def test_error_handling(self):
        error = Error(
            detail="detail",
            status_code=418,
            code="code",
            title="title",
            source={"parameter": "foobar"},
            meta={"foo": "bar"}
        )

        response = flowchart_exception_handler(error, {})
        self.assertIsInstance(response, Response)
        self.assertEqual(response.status_code, 418)
        self.assertDictEqual(response.data, {
            "errors": [
                {
                    "status": "418",
                    "code": "code",
                    "title": "title",
                    "detail": "detail",
                    "source": {"parameter": "foobar"},
                    "meta": {"foo": "bar"}
                }
            ]
        })

    def test_not_found_error(self):
        response = flowchart_exception_handler(NotFoundError(), {})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["errors"][0]["code"], "not_found")
        self.assertEqual(response.data["errors"][0]["detail"], "Not found.")

    def test_foreign_key_error(self):
        with self.assertLogs("drf_flowchart.exception_handlers", level="WARNING"):
            response = flowchart_exception_handler(
                ForeignKeyError("Node 3 does not exist."), {}
            )
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data["errors"][0]["code"], "foreign_key_violation")

    def test_validationerror_with_dict_detail(self):
        error = ValidationError({'name': 'This field may not be blank.'})
        response = flowchart_exception_handler(error, {})
        self.assertEqual(response.status_code, 400)
        self.assertDictEqual(response.data, {
            "errors": [
                {
                    "status": "400",
                    "detail": "This field may not be blank.",
                    "source": {
                        "pointer": "/name"
                    }
                }
            ]
        })

    def test_validationerror_without_dict_detail(self):
        error = DjangoValidationError('"ocelot" is not a valid integer')
        response = flowchart_exception_handler(error, {})
        self.assertIn("errors", response.data)
        self.assertEqual(response.data['errors'][0]['status'], '400')

    def test_apiexception(self):
        error = NotFound("Not Found.")
        response = flowchart_exception_handler(error, {})
        self.assertDictEqual(response.data, {
            "errors": [
                {
                    "status": "404",
                    "detail": "Not Found.",
                }
            ]
        })

    def test_integrityerror(self):
        error = IntegrityError("FOREIGN KEY constraint failed")
        with self.assertLogs("drf_flowchart.exception_handlers", level="WARNING"):
            response = flowchart_exception_handler(error, {})
        self.assertEqual(response.status_code, 409)
        self.assertDictEqual(response.data, {
            "errors": [
                {
                    "status": "409",
                    "code": "integrity_error",
                    "detail": "FOREIGN KEY constraint failed",
                }
            ]
        })

    def test_databaseerror(self):
        error = OperationalError("no such table: nodes")
        with self.assertLogs("drf_flowchart.exception_handlers", level="ERROR"):
            response = flowchart_exception_handler(error, {})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["errors"][0]["code"], "store_error")

    def test_default_handler(self):
        response = flowchart_exception_handler(PermissionDenied(), {})
        self.assertEqual(response.data["errors"][0]["status"], "403")

        response = flowchart_exception_handler(Http404(), {})
        self.assertEqual(response.status_code, 404)

    def test_unhandled(self):
        self.assertIsNone(flowchart_exception_handler(KeyError("boom"), {}))
