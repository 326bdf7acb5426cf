from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.decorators import admin_required, login_required
from ..container import Container
from ..core.enums import SessionSlot
from ..core.exceptions import INLINE_ERRORS, NotFoundError, ValidationError
from .model import StudentFilters

EMPTY_FORM = {
    "roll_number": "",
    "full_name": "",
    "parent_phone": "",
    "course_id": "",
    "year_id": "",
    "branch_id": "",
    "section_id": "",
}


def register(app: Flask, container: Container) -> None:
    def _render_form(ctx, *, form: dict, mode: str, student_id=None, status: int = 200):
        meta = container.academic_service.load_metadata(ctx)
        return (
            render_template(
                "students/form.html",
                form=form,
                mode=mode,
                student_id=student_id,
                meta=meta,
                active_page="students",
            ),
            status,
        )

    @app.route("/students", endpoint="students")
    @login_required
    def students(ctx):
        search = request.args.get("q", "").strip()
        error = None
        rows = []
        try:
            filters = StudentFilters.from_mapping(request.args)
        except ValidationError as e:
            flash(str(e), "warning")
            filters = StudentFilters()

        meta = container.academic_service.load_metadata(ctx)
        try:
            rows = container.student_service.list_students(ctx, filters, search=search)
        except INLINE_ERRORS:
            error = "Failed to sync records with the attendance server."

        return render_template(
            "students/index.html",
            students=rows,
            meta=meta,
            filters=filters,
            search=search,
            error=error,
            active_page="students",
        )

    @app.route("/students/new", methods=["GET", "POST"], endpoint="add_student")
    @admin_required
    def add_student(ctx):
        if request.method == "POST":
            form = {k: request.form.get(k, "") for k in EMPTY_FORM}
            try:
                container.student_service.create_student(ctx, form)
                flash("Student registered.", "success")
                return redirect(url_for("students"))
            except INLINE_ERRORS as e:
                flash(str(e), "danger")
            return _render_form(ctx, form=form, mode="add", status=400)

        return _render_form(ctx, form=dict(EMPTY_FORM), mode="add")

    @app.route("/students/<int:student_id>", endpoint="student_detail")
    @login_required
    def student_detail(ctx, student_id: int):
        try:
            student = container.student_service.get_student(ctx, student_id)
        except NotFoundError:
            flash("Student not found.", "warning")
            return redirect(url_for("students"))
        return render_template("students/detail.html", student=student, active_page="students")

    @app.route("/students/<int:student_id>/edit", methods=["GET", "POST"], endpoint="edit_student")
    @login_required
    def edit_student(ctx, student_id: int):
        if request.method == "POST":
            form = {k: request.form.get(k, "") for k in EMPTY_FORM}
            try:
                container.student_service.update_student(ctx, student_id, form)
                flash("Student updated.", "success")
                return redirect(url_for("students"))
            except INLINE_ERRORS as e:
                flash(str(e), "danger")
            return _render_form(ctx, form=form, mode="edit", student_id=student_id, status=400)

        try:
            student = container.student_service.get_student(ctx, student_id)
        except NotFoundError:
            flash("Student not found.", "warning")
            return redirect(url_for("students"))

        form = {k: "" if getattr(student, k) is None else str(getattr(student, k)) for k in EMPTY_FORM}
        return _render_form(ctx, form=form, mode="edit", student_id=student_id)

    @app.route("/students/<int:student_id>/delete", methods=["POST"], endpoint="delete_student")
    @admin_required
    def delete_student(ctx, student_id: int):
        try:
            container.student_service.delete_student(ctx, student_id)
            flash("Student record deleted.", "success")
        except INLINE_ERRORS as e:
            flash(str(e) or "Delete failed", "danger")
        return redirect(url_for("students"))

    @app.route("/students/<int:student_id>/sms", methods=["POST"], endpoint="send_student_sms")
    @login_required
    def send_student_sms(ctx, student_id: int):
        try:
            container.sms_service.send(ctx, student_id=student_id, work_date=container.today(), slot=SessionSlot.MORNING)
            phone = request.form.get("parent_phone", "")
            flash(f"Test SMS sent to {phone}." if phone else "Test SMS sent.", "success")
        except INLINE_ERRORS as e:
            flash(f"SMS failed: {e}", "danger")
        return redirect(url_for("students"))
