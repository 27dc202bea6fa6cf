# Force SQLModel table registration at test discovery time
from vacation_backend.models.vacation import Vacation  # noqa: F401
