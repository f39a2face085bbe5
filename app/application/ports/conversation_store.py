from abc import ABC, abstractmethod

from app.domain.entities.conversation_state import ConversationState


class ConversationStorePort(ABC):
    @abstractmethod
    def get_state(self, conversation_id: str) -> ConversationState:
        """Return the stored state, or a fresh idle state for an unseen conversation."""
        raise NotImplementedError

    @abstractmethod
    def set_state(self, conversation_id: str, state: ConversationState) -> None:
        raise NotImplementedError

    @abstractmethod
    def has_conversation(self, conversation_id: str) -> bool:
        raise NotImplementedError
