from django.db import models


class Node(models.Model):
    """
    A single step of a workflow.
    """

    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "nodes"
        ordering = ["id"]

    def __str__(self):
        return self.name


class Link(models.Model):
    """
    A directed connection between two nodes.

    Self-loops and duplicate links are allowed. Deleting either endpoint
    deletes the link.
    """

    from_node = models.ForeignKey(
        Node, related_name="previous_links", on_delete=models.CASCADE
    )
    to_node = models.ForeignKey(
        Node, related_name="next_links", on_delete=models.CASCADE
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "links"
        ordering = ["id"]

    def __str__(self):
        return "{} --> {}".format(self.from_node_id, self.to_node_id)
