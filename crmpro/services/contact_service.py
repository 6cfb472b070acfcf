"""Enterprise contact requests."""

import logging

from crmpro.models.constants import ENTERPRISE_CONTACT_REQUIRED_FIELDS
from crmpro.models.contact import EnterpriseContactRequest
from crmpro.services.validation import require_fields

logger = logging.getLogger(__name__)


def record_enterprise_contact(request: EnterpriseContactRequest) -> None:
    """Validate and log an enterprise contact request.

    The request is only written to the log; it is not added to the store
    document's ``contacts`` list.

    Raises:
        ValidationError: If name, email, company or phone is missing
    """
    require_fields(
        request.model_dump(),
        ENTERPRISE_CONTACT_REQUIRED_FIELDS,
        "Lütfen tüm zorunlu alanları doldurun",
    )
    logger.info(
        f"Enterprise contact request: name={request.name} email={request.email} "
        f"company={request.company} phone={request.phone} message={request.message!r}"
    )
