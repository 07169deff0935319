"""Producer service: one producer per CPF/CNPJ document."""

from __future__ import annotations

from typing import Any

from app.models.enums import DocumentTypeEnum
from app.models.producer import Producer
from app.services.errors import DomainRuleError
from app.services.guards import UniqueScope
from app.services.resource_service import ResourceService

DOCUMENT_LENGTH: dict[DocumentTypeEnum, int] = {
	DocumentTypeEnum.CPF: 11,
	DocumentTypeEnum.CNPJ: 14,
}


def check_document_length(document: str, document_type: DocumentTypeEnum) -> None:
	"""CPF documents carry 11 digits, CNPJ documents 14."""
	expected = DOCUMENT_LENGTH[document_type]
	if len(document) != expected:
		raise DomainRuleError(f"{document_type.value} documents must have {expected} digits")


class ProducerService(ResourceService[Producer]):
	collection = "producers"
	fields = ("document", "document_type", "name")

	def unique_scopes(self) -> list[UniqueScope]:
		return [UniqueScope(("document",), self.repository.find_by_document)]

	def check_invariants(self, candidate: dict[str, Any]) -> None:
		check_document_length(candidate["document"], candidate["document_type"])
