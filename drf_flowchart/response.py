from rest_framework import status
from rest_framework.response import Response as BaseResponse

CONTENT_TYPE = "application/json"
FORMAT = "json"

# Body of writes that acknowledge rather than echo the resource
ACKNOWLEDGEMENT = {"data": "success"}


class Response(BaseResponse):
    def __init__(self, *args, **kwargs):
        context = kwargs.pop("context", {})
        super(Response, self).__init__(*args, **kwargs)
        self.context = context

    @classmethod
    def acknowledge(cls, status_code=status.HTTP_202_ACCEPTED):
        return cls(dict(ACKNOWLEDGEMENT), status=status_code)

    @property
    def ok(self):
        """Returns True if :attr:`status_code` is less than 400, False if not."""
        return self.status_code < status.HTTP_400_BAD_REQUEST

    @property
    def created(self):
        """Returns True if :attr:`status_code` is 201, False if not."""
        return self.status_code == status.HTTP_201_CREATED
