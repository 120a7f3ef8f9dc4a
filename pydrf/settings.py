from typing import Optional


class DRFSettings:
    log_parses = False
    log_failures = False

    class Context:
        def __init__(self, log_parses: Optional[bool] = None, log_failures: Optional[bool] = None):
            self.initial_p = DRFSettings.log_parses
            self.initial_f = DRFSettings.log_failures
            self.p = self.initial_p if log_parses is None else log_parses
            self.f = self.initial_f if log_failures is None else log_failures

        def __enter__(self):
            DRFSettings.log_parses = self.p
            DRFSettings.log_failures = self.f

        def __exit__(self, exc_type, exc_val, exc_tb):
            DRFSettings.log_parses = self.initial_p
            DRFSettings.log_failures = self.initial_f
            return False
