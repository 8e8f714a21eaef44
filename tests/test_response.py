from django.test import SimpleTestCase
from rest_framework import status

from drf_flowchart.response import Response


class ResponseTestCase(SimpleTestCase):
    def test_init_with_context(self):
        context = {"key": "value"}
        response = Response(context=context)
        self.assertDictEqual(response.context, context)

    def test_ok(self):
        self.assertTrue(Response(status=status.HTTP_204_NO_CONTENT).ok)
        self.assertFalse(Response(status=status.HTTP_409_CONFLICT).ok)
        self.assertFalse(Response(status=status.HTTP_500_INTERNAL_SERVER_ERROR).ok)

    def test_created(self):
        self.assertTrue(Response(status=status.HTTP_201_CREATED).created)
        self.assertFalse(Response(status=status.HTTP_200_OK).created)

    def test_acknowledge(self):
        response = Response.acknowledge()
        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.data, {"data": "success"})

        response.data["data"] = "changed"
        self.assertEqual(Response.acknowledge().data, {"data": "success"})
