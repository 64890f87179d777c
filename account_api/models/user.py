from datetime import datetime

from sqlalchemy import CheckConstraint, Column, Date, DateTime, Integer, String

from account_api.database import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        # otp and otp_expires are set and cleared together
        CheckConstraint(
            "(otp IS NULL AND otp_expires IS NULL) OR (otp IS NOT NULL AND otp_expires IS NOT NULL)",
            name="ck_users_otp_pair",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)

    # Registration fields
    name = Column(String(50), nullable=False)
    mobile = Column(String(10), unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    dob = Column(Date, nullable=False)
    gender = Column(String, nullable=False)
    address = Column(String, nullable=False)

    # bcrypt digest, never the plaintext
    password = Column(String, nullable=False)

    # Pending verification / password reset
    otp = Column(String(6), nullable=True)
    otp_expires = Column(DateTime, nullable=True)  # naive UTC

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def issue_otp(self, code: str, expires_at: datetime) -> None:
        self.otp = code
        self.otp_expires = expires_at

    def clear_otp(self) -> None:
        self.otp = None
        self.otp_expires = None

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
