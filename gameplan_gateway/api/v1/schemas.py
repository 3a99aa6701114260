"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class LoanCalculationRequest(BaseModel):
    """Request body for POST /calculate-loan"""

    model_config = ConfigDict(populate_by_name=True)

    loan_amount: float = Field(..., alias="loanAmount", allow_inf_nan=False, description="Principal to borrow")
    interest_rate: float = Field(..., alias="interestRate", allow_inf_nan=False, description="Annual rate in percent")
    duration: int = Field(..., description="Repayment term in months")


class RepaymentEntrySchema(BaseModel):
    """Single month in a repayment schedule"""

    model_config = ConfigDict(populate_by_name=True)

    month: int
    monthly_payment: float = Field(..., alias="monthlyPayment")
    interest_portion: float = Field(..., alias="interestPortion")
    principal_portion: float = Field(..., alias="principalPortion")
    remaining_balance: float = Field(..., alias="remainingBalance")


class LoanCalculationResponse(BaseModel):
    """Response for POST /calculate-loan"""

    model_config = ConfigDict(populate_by_name=True)

    monthly_payment: float = Field(..., alias="monthlyPayment")
    total_interest_paid: float = Field(..., alias="totalInterestPaid")
    repayment_schedule: List[RepaymentEntrySchema] = Field(..., alias="repaymentSchedule")


class ChatRequest(BaseModel):
    """Request body for POST /chat"""

    message: str


class ChatResponse(BaseModel):
    """Response for POST /chat"""

    response: str


class ErrorResponse(BaseModel):
    """Body returned with HTTP 400"""

    error: str
