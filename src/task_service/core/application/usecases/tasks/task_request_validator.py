from task_service.core.application.exceptions import FieldViolation, TaskValidationError
from task_service.core.domain.task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH


class TaskRequestValidator:
    """Field constraints shared by create and update requests."""

    @staticmethod
    def collect_violations(title: str, description: str) -> list[FieldViolation]:
        violations: list[FieldViolation] = []

        if not title:
            violations.append(FieldViolation(field="title", message="title is required"))
        elif len(title) > TITLE_MAX_LENGTH:
            violations.append(
                FieldViolation(
                    field="title",
                    message=f"title must be at most {TITLE_MAX_LENGTH} characters",
                )
            )

        if len(description) > DESCRIPTION_MAX_LENGTH:
            violations.append(
                FieldViolation(
                    field="description",
                    message=f"description must be at most {DESCRIPTION_MAX_LENGTH} characters",
                )
            )

        return violations

    @classmethod
    def validate(cls, title: str, description: str) -> None:
        violations = cls.collect_violations(title, description)
        if violations:
            raise TaskValidationError(
                violations,
                context={"fields": [v.field for v in violations]},
            )
