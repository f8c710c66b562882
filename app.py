import logging

from flask import Flask, render_template, request
from nacha_validator import (
    ERROR,
    HINT,
    INFORMATION,
    WARNING,
    describe_line,
    sec_codes,
    split_lines,
    summarize,
    validate,
    validate_routing_number,
)

logger = logging.getLogger(__name__)

SEVERITY_CLASSES = {
    ERROR: "error",
    WARNING: "warning",
    INFORMATION: "information",
    HINT: "hint",
}


def group_diagnostics(diagnostics):
    """
    Splits the diagnostics by severity, keeping the scan order inside
    each group.
    """
    groups = {name: [] for name in SEVERITY_CLASSES.values()}
    for diag in diagnostics:
        groups[SEVERITY_CLASSES.get(diag["severity"], "error")].append(diag)
    return groups


def annotate_fields(text, diagnostics):
    """
    Adds the name of the field under each diagnostic (same lookup the editor
    hover uses) and the raw record, so the result page can show both.
    """
    lines = split_lines(text)
    codes = sec_codes(lines)
    annotated = []
    for diag in diagnostics:
        line = lines[diag["line"]] if diag["line"] < len(lines) else ""
        sec_code = codes[diag["line"]] if diag["line"] < len(codes) else ""
        info = describe_line(line, diag["start"], sec_code)
        item = dict(diag)
        item["field"] = info["field"]["name"] if info and info["field"] else None
        item["record"] = line
        annotated.append(item)
    return annotated


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(
        OVERLONG_RECORD_SEVERITY="hint",
        BLOCK_COUNT_SEVERITY="warning",
        CREATION_TIME_SEVERITY="warning",
        MAX_CONTENT_LENGTH=16 * 1024 * 1024,
    )
    app.config.from_prefixed_env()
    if test_config:
        app.config.update(test_config)

    @app.route("/")
    def index():
        """
        Home page: form to upload the ACH file.
        """
        return render_template("index.html")

    @app.route("/validate", methods=["POST"])
    def validate_file():
        """
        Receives the ACH file, runs the validation and the quick summary and
        renders the result page.
        """
        uploaded = request.files.get("file")
        if not uploaded:
            return "No file uploaded.", 400

        content = uploaded.read().decode("latin-1", errors="ignore")
        logger.info("Validating upload %s (%d bytes)", uploaded.filename, len(content))

        severities = {
            "overlong_record": app.config["OVERLONG_RECORD_SEVERITY"],
            "block_count": app.config["BLOCK_COUNT_SEVERITY"],
            "creation_time": app.config["CREATION_TIME_SEVERITY"],
        }
        diagnostics = annotate_fields(content, validate(content, severities))

        result = {
            "filename": uploaded.filename,
            "records": len([l for l in split_lines(content) if l]),
            "diagnostics": group_diagnostics(diagnostics),
            "total": len(diagnostics),
            "summary": summarize(content),
        }
        return render_template("result.html", result=result)

    @app.route("/routing", methods=["GET", "POST"])
    def routing():
        """
        Page to check the check digit of a routing number.
        """
        errors = []
        info = {}
        routing_number = ""

        if request.method == "POST":
            routing_number = (request.form.get("routing_number") or "").strip()
            errors, info = validate_routing_number(routing_number)

        return render_template(
            "routing.html",
            errors=errors,
            info=info,
            routing_number=routing_number,
        )

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    # debug=True helps during development
    app.run(debug=True)
