from .commercial_bank_client import CommercialBankClient

__all__ = ["CommercialBankClient"]
