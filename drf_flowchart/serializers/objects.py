from collections import OrderedDict

from rest_framework import serializers


class DocumentSerializer(serializers.Serializer):
    """
    A Django Rest Framework Serializer that represents the root document object
    of a JSON response.
    """

    def to_representation(self, instance):
        """
        Create an ordered dictionary from a document, removing the data node
        if errors exist.

        :param drf_flowchart.serializers.objects.DocumentSerializer self: This object instance
        :param drf_flowchart.objects.Document instance: An object containing top-level nodes
        :return: An ordered dictionary created from instance data
        :rtype: collections.OrderedDict
        """

        data = OrderedDict()
        data['data'] = instance.data

        if instance.errors:
            # A document carries either data or errors, never both
            del(data['data'])
            data['errors'] = instance.errors
        if instance.meta:
            data['meta'] = instance.meta

        return data


class ErrorSerializer(serializers.Serializer):
    """
    A simple serializer for Errors
    """

    def to_representation(self, instance):
        """
        Create an ordered dictionary from an error object.

        :param drf_flowchart.serializers.objects.ErrorSerializer self: This object instance
        :param drf_flowchart.objects.Error instance: An error
        :return: An ordered dictionary created from the instance data
        :rtype: OrderedDict
        """

        data = OrderedDict()

        if instance.status_code:
            # status is always a string
            data['status'] = str(instance.status_code)
        if instance.code:
            data['code'] = instance.code
        if instance.title:
            data['title'] = instance.title
        if instance.detail:
            data['detail'] = instance.detail
        if instance.source:
            data['source'] = instance.source
        if instance.meta:
            data['meta'] = instance.meta

        return data
