"""Example values seeded into the fiat payout form."""

from payout_portal.models.enums import AppView

# Colombian peso (COP) fiat payout to an individual in Medellin
DEFAULT_COP_FIAT_VALUES: dict[str, str] = {
    # Fiat payment details
    "bank_name": "Bancamia S.A.",
    "bank_account_owner": "test",
    "account_type": "CHECKING",
    "phone_number": "+57 601 555 5555",
    "bank_account_number": "1234567890123456",
    "document_number": "1234563",
    "document_type": "NATIONAL_ID",
    # Recipient details
    "first_name": "Javier",
    "last_name": "Gomez",
    "email": "jgomez@gmail.com",
    "date_of_birth": "1980-02-22",
    # Address details
    "street": "Cra. 37 #10A 29",
    "city": "Medellin",
    "state": "Antioquia",
    "postal_code": "050015",
    "country": "CO",
}


def default_form_values(view: AppView) -> dict[str, str]:
    """Form values to seed when a view is shown. Only the fiat payout view has any."""
    if view == AppView.CREATE_FIAT_PAYOUT:
        return dict(DEFAULT_COP_FIAT_VALUES)
    return {}
