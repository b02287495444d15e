from __future__ import annotations

import io
import logging

from flask import Flask, abort, flash, g, render_template, request, send_file

from ..common.views import flash_error, forbidden, is_not_found, page_arg
from ..container import Container
from ..core.exceptions import AuthorizationError
from .service import SORT_KEYS, PayslipListView

logger = logging.getLogger(__name__)


def render_pdf(html: str, base_url: str) -> bytes:
    # needs the native pango/cairo libraries at import time
    from weasyprint import HTML

    return HTML(string=html, base_url=base_url).write_pdf()


def register(app: Flask, container: Container) -> None:
    def _load_view(payslip_id: int):
        return container.payslip_service.view(
            payslip_id,
            role_name=g.auth.role_name,
            employee_id=g.auth.employee_id,
        )

    @app.route("/payroll/payslips", endpoint="payslips")
    def payslips():
        try:
            view = container.payslip_service.load(role_name=g.auth.role_name, employee_id=g.auth.employee_id)
        except Exception as e:
            flash_error(e, "Failed to load payslips. Please try again.")
            view = PayslipListView(payslips=[])
        if view.error:
            flash("Cannot display payslips: user configuration error.", "danger")

        sort_key = request.args.get("sort")
        direction = "desc" if request.args.get("dir") == "desc" else "asc"
        table = container.payslip_service.table(
            view.payslips,
            term=request.args.get("q"),
            sort_key=sort_key,
            direction=direction,
            page=page_arg(),
            per_page=int(app.config.get("ITEMS_PER_PAGE", 10)),
        )
        return render_template(
            "payslips/list.html",
            view=view,
            table=table,
            sort_key=sort_key,
            direction=direction,
            sort_keys=SORT_KEYS,
            active_page="payslips",
        )

    @app.route("/payroll/payslips/view/<int:payslip_id>", endpoint="view_payslip")
    def view_payslip(payslip_id: int):
        try:
            view = _load_view(payslip_id)
        except AuthorizationError:
            return forbidden()
        except Exception as e:
            if is_not_found(e):
                abort(404)
            flash_error(e, "Failed to load payslip.")
            return render_template("payslips/error.html", active_page="payslips"), 502
        return render_template(
            "payslips/view.html",
            view=view,
            summary=container.payslip_service.summary(view),
            printable=request.args.get("print") == "1",
            active_page="payslips",
        )

    @app.route("/payroll/payslips/view/<int:payslip_id>.pdf", endpoint="download_payslip")
    def download_payslip(payslip_id: int):
        try:
            view = _load_view(payslip_id)
        except AuthorizationError:
            return forbidden()
        except Exception as e:
            if is_not_found(e):
                abort(404)
            flash_error(e, "Failed to load payslip.")
            return render_template("payslips/error.html", active_page="payslips"), 502

        html = render_template(
            "payslips/view.html",
            view=view,
            summary=container.payslip_service.summary(view),
            printable=True,
        )
        pdf = render_pdf(html, base_url=request.host_url)
        logger.info("Generated payslip PDF %s (%d bytes)", view.pdf_filename, len(pdf))
        return send_file(
            io.BytesIO(pdf),
            mimetype="application/pdf",
            as_attachment=True,
            download_name=view.pdf_filename,
        )
