from .models import FileReport, FormatOutcome, ReportStatus


def outcome_to_report(outcome: FormatOutcome) -> FileReport:
    """Convert an internal dataclass outcome to an external Pydantic report"""
    if outcome.error:
        status = ReportStatus.ERROR
    elif outcome.content_changed:
        status = ReportStatus.FORMATTED
    elif outcome.engine_ran:
        status = ReportStatus.UNCHANGED
    else:
        status = ReportStatus.SKIPPED

    return FileReport(
        path=str(outcome.path),
        status=status,
        backup_path=str(outcome.backup_path) if outcome.backup_path else None,
        message=outcome.error,
    )
