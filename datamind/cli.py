"""
Command-line interface for DataMind.

Provides commands for:
- Analysing a data file (column profiles and insights)
- Asking a single question about a data file
- Chatting interactively about a data file
"""

import sys
from datetime import date

import click

from datamind.chat.conversation import Conversation
from datamind.chat.query_interpreter import QueryInterpreter
from datamind.core.config import AnalysisConfig
from datamind.core.constants import CHAT_EXIT_WORDS, DEFAULT_RESPONSE_DELAY
from datamind.core.exceptions import DataMindException
from datamind.core.logging_config import setup_logging, get_logger
from datamind.core.pretty_output import PrettyOutput as po
from datamind.loaders.dataset_loader import load_dataset
from datamind.profiler.engine import DatasetAnalyzer
from datamind.reporters.markdown_reporter import ReportExporter

logger = get_logger(__name__)

LOG_LEVELS = click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False)


def _load_config(config_file):
    return AnalysisConfig.from_yaml(config_file) if config_file else AnalysisConfig()


def _fail(error: DataMindException):
    po.error(error.message)
    logger.debug(f"Error details: {error.to_dict()}")
    sys.exit(1)


def _print_report(report):
    po.section("Column Profiles")
    numeric_rows = []
    categorical_rows = []
    for name, profile in report.profiles.items():
        if profile.is_numeric:
            numeric_rows.append((
                name, profile.mean_display, profile.median_display,
                profile.min_display, profile.max_display, profile.missing_pct
            ))
        else:
            categorical_rows.append((
                name, profile.unique_count, profile.mode if profile.mode is not None else "-",
                profile.missing_pct
            ))

    if numeric_rows:
        po.compact_table(["Column", "Mean", "Median", "Min", "Max", "Missing"], numeric_rows)
        print()
    if categorical_rows:
        po.compact_table(["Column", "Unique", "Mode", "Missing"], categorical_rows)

    po.section("AI Insights")
    if not report.insights:
        po.info("No insights detected.")
    for insight in report.insights:
        po.finding(f"[{insight.agent.value}] {insight.plain_message}", severity=insight.severity.value)


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """
    DataMind - dataset analysis and rule-based data Q&A.

    Profiles every column of a tabular file, detects correlations and
    anomalies, and answers simple questions about the data.
    """
    pass


@cli.command()
@click.argument('file_path', type=click.Path(exists=True))
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True), help='YAML file with analysis thresholds')
@click.option('--delimiter', '-d', default=None, help='Column delimiter for CSV files (default: auto-detect)')
@click.option('--markdown-output', '-m', help='Path for Markdown insight export')
@click.option('--json-output', '-j', help='Path for JSON report output')
@click.option('--log-level', type=LOG_LEVELS, default='WARNING', help='Logging level')
@click.option('--log-file', type=click.Path(), help='Optional log file path')
def analyze(file_path, config_file, delimiter, markdown_output, json_output, log_level, log_file):
    """
    Analyse a data file and print column profiles and insights.

    FILE_PATH: CSV or JSON data file

    Examples:

    \b
    datamind analyze data/sales.csv
    datamind analyze data/sales.csv -m insights.md -j report.json
    """
    setup_logging(level=log_level, log_file=log_file)

    try:
        config = _load_config(config_file)
        dataset = load_dataset(file_path, delimiter=delimiter)
        report = DatasetAnalyzer(config).analyze(dataset)

        po.header(f"Exploring: {dataset.name}")
        if report.is_empty:
            po.warning("Dataset has no rows; nothing to analyse.")
            return

        po.success(f"{dataset.row_count:,} rows x {dataset.column_count} columns analysed")
        _print_report(report)

        exporter = ReportExporter()
        if markdown_output:
            content = exporter.render_markdown(report, dataset.name, date.today())
            po.output_file("Markdown", exporter.write(content, markdown_output, "markdown"))
        if json_output:
            po.output_file("JSON", exporter.write(exporter.render_json(report), json_output, "json"))
    except DataMindException as e:
        _fail(e)


@cli.command()
@click.argument('file_path', type=click.Path(exists=True))
@click.argument('question', nargs=-1, required=True)
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True), help='YAML file with analysis thresholds')
@click.option('--delimiter', '-d', default=None, help='Column delimiter for CSV files (default: auto-detect)')
@click.option('--log-level', type=LOG_LEVELS, default='WARNING', help='Logging level')
def ask(file_path, question, config_file, delimiter, log_level):
    """
    Ask one question about a data file.

    \b
    datamind ask data/sales.csv what is the average of amount
    """
    setup_logging(level=log_level)

    text = " ".join(question).strip()
    if not text:
        po.error("Question must not be empty")
        sys.exit(1)

    try:
        config = _load_config(config_file)
        dataset = load_dataset(file_path, delimiter=delimiter)
        report = DatasetAnalyzer(config).analyze(dataset)
        po.answer(QueryInterpreter().answer(text, dataset, report))
    except DataMindException as e:
        _fail(e)


@cli.command()
@click.argument('file_path', type=click.Path(exists=True))
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True), help='YAML file with analysis thresholds')
@click.option('--delimiter', '-d', default=None, help='Column delimiter for CSV files (default: auto-detect)')
@click.option('--delay', type=float, default=DEFAULT_RESPONSE_DELAY, help='Seconds to pause before each answer')
@click.option('--log-level', type=LOG_LEVELS, default='WARNING', help='Logging level')
def chat(file_path, config_file, delimiter, delay, log_level):
    """
    Chat about a data file. Type 'exit' or 'quit' to leave.
    """
    setup_logging(level=log_level)

    try:
        config = _load_config(config_file)
        dataset = load_dataset(file_path, delimiter=delimiter)
        report = DatasetAnalyzer(config).analyze(dataset)
    except DataMindException as e:
        _fail(e)

    conversation = Conversation(dataset, report, response_delay=delay)
    po.header(f"Chatting about: {dataset.name}")

    while True:
        try:
            text = click.prompt("You", default="", show_default=False)
        except (EOFError, click.Abort):
            break
        if text.strip().lower() in CHAT_EXIT_WORDS:
            break
        answer = conversation.ask(text)
        if answer is not None:
            po.answer(answer)

    po.info(f"{len(conversation.messages) // 2} questions answered")


def main():
    cli()


if __name__ == '__main__':
    main()
