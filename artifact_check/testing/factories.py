"""Test factories for generating test data."""

from polyfactory.factories import DataclassFactory

from artifact_check.models.result import Result, Status


class ResultFactory(DataclassFactory[Result]):
    """Factory for Result."""

    __model__ = Result

    detail = None


class PassedResultFactory(ResultFactory):
    """Factory for PASS results."""

    status = Status.PASS


class FailedResultFactory(ResultFactory):
    """Factory for FAIL results."""

    status = Status.FAIL
