from typing import Any, Mapping, Sequence, Union

from chatbridge.domain.models import Message

MessageLike = Union[Message, Mapping[str, Any]]

# A single message or an ordered history, oldest first
ConversationInput = Union[MessageLike, Sequence[MessageLike]]
