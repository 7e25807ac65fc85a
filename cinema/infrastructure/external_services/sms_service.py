"""SMS stand-in: codes are written to the application log"""

import logging


logger = logging.getLogger(__name__)


class SmsService:

    async def send_verification_code(self, mobile_number: str, code: str, expires_in_minutes: int) -> None:
        # No SMS gateway is wired up; the log is the delivery channel
        logger.info(
            "SMS verification code for %s: %s (expires in %d minutes)",
            mobile_number, code, expires_in_minutes
        )
