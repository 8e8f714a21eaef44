from rest_framework import serializers

from ..models import Link, Node


class NodeSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Node
        basename = "nodes"
        fields = ("id", "name", "createdAt", "updatedAt")


class LinkSerializer(serializers.ModelSerializer):
    """
    Exposes the foreign keys as plain integers.

    Whether `fromId` and `toId` point at existing nodes is not a validation
    concern here; the link endpoints check it separately so that a dangling
    reference is reported as a foreign key violation.
    """

    fromId = serializers.IntegerField(source="from_node_id")
    toId = serializers.IntegerField(source="to_node_id")
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Link
        basename = "links"
        fields = ("id", "fromId", "toId", "createdAt", "updatedAt")
