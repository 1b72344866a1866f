from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from workforce.utils.datetime_utils import ensure_utc

# SQLite hands back naive timestamps; every response carries an explicit UTC offset.
UtcDateTime = Annotated[datetime, AfterValidator(ensure_utc)]
