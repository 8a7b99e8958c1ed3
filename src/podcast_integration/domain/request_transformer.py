"""Maps parsed manifests onto production requests."""

from .models import Manifest, Message, ProductionRequest

CONTENT_TYPE = "application/json"


class RequestTransformer:
    """Builds the canonical ProductionRequest message for a manifest."""

    def transform(
        self, message: Message[Manifest], file_name: str
    ) -> Message[ProductionRequest]:
        """
        Converts a manifest message into a production request message.

        The file name always comes from the originating file, never from the
        manifest body. Headers set here only fill keys the incoming message
        does not carry already.

        Args:
            message: The parsed manifest with its headers.
            file_name: Name of the manifest file on disk.

        Returns:
            A new message holding the ProductionRequest.
        """
        manifest = message.payload
        request = ProductionRequest(
            interview_file=manifest.interview_file,
            introduction_file=manifest.introduction_file,
            file_name=file_name,
            timestamp=manifest.timestamp,
            description=manifest.description,
        )
        return message.with_payload(request).with_headers_if_absent(
            {"content_type": CONTENT_TYPE, "file_name": file_name}
        )
