"""Employee entity.

Only the parts the invitation flow touches are modelled here.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from attend.domain.model.common import DomainModel
from attend.domain.value import EmployeeId, TelegramId


class Employee(DomainModel):
    """Employee registered through an accepted invitation.

    At most one employee exists per Telegram identity.
    """

    id: EmployeeId
    telegram_id: TelegramId
    first_name: str = Field(min_length=1, max_length=100)
    last_name: Optional[str] = None
    username: Optional[str] = None
    phone_number: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    is_active: bool = True
    registered_at: datetime
