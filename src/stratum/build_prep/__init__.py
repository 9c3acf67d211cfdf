from .process_profile import LCDProfile, PrintProfile, SLAProfile, validate_profile

__all__ = ["LCDProfile", "PrintProfile", "SLAProfile", "validate_profile"]
