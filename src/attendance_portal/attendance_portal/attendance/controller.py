from __future__ import annotations

from dataclasses import replace
from datetime import date

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.decorators import login_required
from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_int
from ..container import Container
from ..core.enums import SessionSlot
from ..core.exceptions import INLINE_ERRORS, ValidationError
from ..students.model import StudentFilters
from .model import apply_marks, count_marks


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str | None) -> date:
        if not value:
            return container.today()
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"Invalid date: {value}")

    def _parse_slot(value: str | None) -> SessionSlot:
        try:
            return SessionSlot(value or SessionSlot.MORNING.value)
        except ValueError:
            raise ValidationError(f"Invalid session: {value}")

    def _query(work_date: date, slot: SessionSlot, filters: StudentFilters) -> dict:
        return {"date": work_date.isoformat(), "session": slot.value, **filters.to_params()}

    @app.route("/attendance", methods=["GET"], endpoint="attendance")
    @login_required
    def attendance(ctx):
        search = request.args.get("q", "").strip()
        meta = container.academic_service.load_metadata(ctx)
        sheet = None

        try:
            work_date = _parse_date(request.args.get("date"))
            slot = _parse_slot(request.args.get("session"))
            filters = StudentFilters.from_mapping(request.args)
        except ValidationError as e:
            flash(str(e), "warning")
            work_date, slot, filters = container.today(), SessionSlot.MORNING, StudentFilters()

        if request.args.get("load") or not filters.is_empty:
            try:
                sheet = container.attendance_service.load_sheet(ctx, filters, work_date=work_date, slot=slot)
                if not sheet.roster:
                    flash("No students found matching the current filters.", "info")
            except ValidationError as e:
                flash(str(e), "warning")
            except INLINE_ERRORS:
                flash("Roster retrieval failed. Check the attendance server connection.", "danger")

        visible = [s for s in sheet.roster if s.matches(search)] if sheet else []
        return render_template(
            "attendance/index.html",
            meta=meta,
            sheet=sheet,
            visible=visible,
            work_date=work_date,
            slot=slot,
            filters=filters,
            search=search,
            today=container.today(),
            slots=list(SessionSlot),
            active_page="attendance",
        )

    @app.route("/attendance", methods=["POST"], endpoint="submit_attendance")
    @login_required
    def submit_attendance(ctx):
        try:
            work_date = _parse_date(request.form.get("date"))
            slot = _parse_slot(request.form.get("session"))
            filters = StudentFilters.from_mapping(request.form)
            roster_ids = [optional_int(v) for v in request.form.getlist("student_id")]
            marks = container.attendance_service.marks_from_form([i for i in roster_ids if i is not None], request.form)
        except ValidationError as e:
            flash(str(e), "danger")
            return redirect(url_for("attendance"))

        try:
            container.attendance_service.submit(ctx, work_date=work_date, slot=slot, marks=marks)
        except INLINE_ERRORS as e:
            flash(str(e), "danger")
            return _render_retry(ctx, work_date=work_date, slot=slot, filters=filters, marks=marks)

        counts = count_marks(marks)
        flash(
            f"Attendance saved for the {slot.value} session: {counts['present']} present, "
            f"{counts['absent']} absent. Guardian alerts queued.",
            "success",
        )
        # Roster is not reloaded so the same sheet cannot be submitted twice by accident.
        return redirect(url_for("attendance", date=work_date.isoformat(), session=slot.value))

    def _render_retry(ctx, *, work_date, slot, filters, marks):
        """Show the rejected sheet again with the marks the user had chosen."""
        meta = container.academic_service.load_metadata(ctx)
        sheet = None
        try:
            sheet = container.attendance_service.load_sheet(ctx, filters, work_date=work_date, slot=slot)
            kept = {sid: status for sid, status in marks.items() if sid in sheet.marks}
            sheet = replace(sheet, marks=apply_marks(sheet.marks, kept))
        except INLINE_ERRORS:
            return redirect(url_for("attendance", **_query(work_date, slot, filters)))

        return (
            render_template(
                "attendance/index.html",
                meta=meta,
                sheet=sheet,
                visible=list(sheet.roster),
                work_date=work_date,
                slot=slot,
                filters=filters,
                search="",
                today=container.today(),
                slots=list(SessionSlot),
                active_page="attendance",
            ),
            400,
        )

    @app.route("/attendance/report", endpoint="attendance_report")
    @login_required
    def attendance_report(ctx):
        records = []
        try:
            work_date = _parse_date(request.args.get("date"))
            slot = _parse_slot(request.args.get("session"))
        except ValidationError as e:
            flash(str(e), "warning")
            work_date, slot = container.today(), SessionSlot.MORNING

        try:
            records = container.attendance_service.report(ctx, work_date=work_date, slot=slot)
            if not records:
                flash("No attendance has been recorded for this session yet.", "info")
        except INLINE_ERRORS as e:
            flash(str(e), "danger")

        return render_template(
            "attendance/report.html",
            records=records,
            counts=count_marks({r.student_id: r.status for r in records}),
            work_date=work_date,
            slot=slot,
            slots=list(SessionSlot),
            active_page="attendance_report",
        )

    @app.route("/attendance/summary", endpoint="attendance_summary")
    @login_required
    def attendance_summary(ctx):
        meta = container.academic_service.load_metadata(ctx)
        rows = []
        section_id = None
        try:
            section_id = optional_int(request.args.get("section_id"))
            if section_id is not None:
                rows = container.attendance_service.summary(ctx, section_id=section_id)
                if not rows:
                    flash("No attendance summary is available for this section.", "info")
        except INLINE_ERRORS as e:
            flash(str(e), "danger")

        return render_template(
            "attendance/summary.html",
            rows=rows,
            meta=meta,
            section_id=section_id,
            active_page="attendance_summary",
        )
