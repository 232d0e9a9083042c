from sqlalchemy import CheckConstraint, Column, Integer, String, Text
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


class Company(Base):
    """
    Company that posts jobs, addressed by its short handle.
    """
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    handle = Column(String(25), primary_key=True)
    name = Column(Text, unique=True, nullable=False)
    num_employees = Column(Integer, nullable=True)
    description = Column(Text, nullable=False, default="")
    logo_url = Column(Text, nullable=True)

    jobs = relationship(
        "Job",
        back_populates="company",
        cascade="all, delete-orphan",
        order_by="Job.id",
    )

    def __repr__(self):
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
