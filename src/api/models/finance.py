from sqlalchemy import Column, String, Integer, Numeric, Text, Boolean, Date, DateTime, ForeignKey
from sqlalchemy.sql import func

from src.api.core.database import Base
from src.api.models.enums import ExpenseType, sql_enum


class FinancialRecord(Base):
    __tablename__ = "financial_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    partnership_id = Column(Integer, ForeignKey("partnerships.id"), nullable=False, index=True)
    expense_type = Column(sql_enum(ExpenseType, "expense_type"), nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    description = Column(Text, nullable=False)
    transaction_date = Column(DateTime(timezone=True), nullable=False)
    receipt_url = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<FinancialRecord {self.expense_type} {self.amount}>"


class InsurancePolicy(Base):
    __tablename__ = "insurance_policies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    partnership_id = Column(Integer, ForeignKey("partnerships.id"), nullable=False, index=True)
    policy_number = Column(String(100), unique=True, nullable=False)
    coverage_amount = Column(Numeric(15, 2), nullable=False)
    premium_amount = Column(Numeric(15, 2), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    coverage_details = Column(Text, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<InsurancePolicy {self.policy_number}>"
