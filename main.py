"""Main entry point for the Task Analysis Engine."""

import argparse
import json
import logging
import sys
from collections import Counter

from task_analysis.engine.analyzer import TaskAnalyzer
from task_analysis.utils.config import load_config, get_default_config
from task_analysis.utils.task_loader import load_tasks


def run_analysis(
    tasks_path: str,
    project_id: str,
    value: int = None,
    config_path: str = None,
    output_format: str = "json",
    output_path: str = None,
) -> int:
    """Analyze one project and print the report."""
    config = load_config(config_path) if config_path else get_default_config()

    tasks = load_tasks(tasks_path)
    analyzer = TaskAnalyzer(config)
    result = analyzer.analyze(tasks, project_id, value)

    if result is None:
        print(f"Project not found or has no completed tasks: {project_id}", file=sys.stderr)
        return 1

    if output_format == "text":
        text = result.to_human_readable()
    else:
        indent = analyzer.config.get('output', {}).get('indent', 2)
        text = json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)

    print(text)

    if output_path:
        with open(output_path, 'w') as f:
            f.write(text + "\n")
        print(f"\nReport saved to: {output_path}", file=sys.stderr)

    return 0


def list_projects(tasks_path: str) -> int:
    """Print the projects referenced by the tasks file."""
    tasks = load_tasks(tasks_path)

    counts = Counter()
    names = {}
    for task in tasks:
        if task.project is None:
            continue
        counts[task.project.id] += 1
        names.setdefault(task.project.id, task.project.name)

    if not counts:
        print("No projects found.")
        return 0

    print(f"{'Project ID':<20} {'Name':<30} {'Tasks':<8}")
    print("-" * 58)
    for project_id in sorted(counts):
        print(f"{project_id:<20} {names[project_id]:<30} {counts[project_id]:<8}")

    return 0


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Task Analysis Engine"
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--verbose', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    analyze_parser = subparsers.add_parser(
        'analyze', parents=[common], help='Analyze one project'
    )
    analyze_parser.add_argument('tasks', help='Path to tasks file (JSON or YAML)')
    analyze_parser.add_argument('project_id', help='Identifier of the project to analyze')
    analyze_parser.add_argument(
        '--value',
        type=int,
        default=None,
        help='Scalar for the per-value ratio, e.g. a page count'
    )
    analyze_parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration file (YAML or JSON)'
    )
    analyze_parser.add_argument(
        '--format',
        choices=['json', 'text'],
        default='json',
        help='Output format (default: json)'
    )
    analyze_parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Also write the report to this file'
    )

    projects_parser = subparsers.add_parser(
        'projects', parents=[common], help='List projects in a tasks file'
    )
    projects_parser.add_argument('tasks', help='Path to tasks file (JSON or YAML)')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        if args.command == 'analyze':
            return run_analysis(
                args.tasks,
                args.project_id,
                value=args.value,
                config_path=args.config,
                output_format=args.format,
                output_path=args.output,
            )
        elif args.command == 'projects':
            return list_projects(args.tasks)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
