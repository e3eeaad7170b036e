"""
cli.py - terminal search portal
Features:
- Ranked suggestions for whatever you type, with category, "new" badge, usage count and age
- Direct answers for exact matches
- Self-learning: /add commits a term, /pick re-uses a suggestion, /recent replays history
- Session analytics and JSON config
- Uses Rich for tables and formatting
"""

import argparse
import random
import shlex
import time
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from adaptive_autocompleter.core.records import RankedSuggestion, SearchResult, TermRecord
from adaptive_autocompleter.core.seed import SAMPLE_TERMS
from adaptive_autocompleter.core.session import SearchSession
from adaptive_autocompleter.utils.config_manager import Config
from adaptive_autocompleter.utils.logger_utils import Log
from adaptive_autocompleter.utils.metrics_tracker import Metrics

CATEGORY_STYLES = {
    "AI": "magenta",
    "Programming": "blue",
    "DevOps": "green",
    "Cloud": "cyan",
    "Database": "dark_orange",
    "User Search": "deep_pink3",
}

HELP = (
    "type text to search\n"
    "/add <text>   learn a term (or refresh it)   /commit  learn the last query\n"
    "/pick <n>     use suggestion n               /recent [n]  list or replay history\n"
    "/stats        analytics                      /config [key val]\n"
    "/bench        time 100 searches              /quit"
)


class CLI:
    """Command-line interface (CLI) class wrapping one SearchSession."""

    def __init__(
        self,
        session: Optional[SearchSession] = None,
        cfg: Optional[Config] = None,
        console: Optional[Console] = None,
        seed: Optional[bool] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the CLI:
        - builds (or takes) the SearchSession
        - seeds the reference terms unless disabled
        - hooks learn notifications to the console and log file
        """
        self.cfg = cfg or Config()
        self.console = console or Console()
        self.log = Log(path=self.cfg.get("log_path"), echo=False)
        self.metrics = Metrics()
        self.rng = rng or random.Random()

        self.session = session or SearchSession(
            max_suggestions=self.cfg.get("max_suggestions"),
            recent_limit=self.cfg.get("recent_limit"),
        )
        if seed is None:
            seed = self.cfg.get("seed_samples")
        if seed:
            self.session.load_seed(
                SAMPLE_TERMS,
                max_age_seconds=self.cfg.get("seed_max_age_seconds"),
                rng=self.rng,
            )
        self.session.on_learn(self._announce_learned)

        self.last_query = ""
        self.last_result = SearchResult()
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - prompts for input
        - slash commands go to handle_command, anything else is a search
        """
        self.console.rule("[bold magenta]Adaptive Search Portal[/bold magenta]")
        self.console.print("[cyan]Type to search. /add learns new terms, /help lists commands.[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Search[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle_line(line)

    def handle_line(self, line: str):
        if not line.strip():
            return
        if line.startswith("/"):
            self.handle_command(line)
        else:
            self.search(line)

    # SEARCH -----------------------------------------------------------
    def search(self, query: str) -> SearchResult:
        t0 = time.perf_counter()
        result = self.session.search(query)
        self.metrics.record("search_ms", (time.perf_counter() - t0) * 1000.0)
        self.last_query = query
        self.last_result = result
        self._render_result(result)
        return result

    def _render_result(self, result: SearchResult):
        if result.is_empty:
            self.console.print("[dim]no suggestions - /commit to teach this term[/dim]")
        else:
            self.console.print(self._suggestion_table(result.suggestions))
        if result.intent:
            self.console.print(f"[dim]intent:[/dim] {result.intent}")
        if result.direct_answer:
            self.console.print(Panel(escape(result.direct_answer), title="Direct Answer", border_style="blue"))

    def _suggestion_table(self, suggestions) -> Table:
        table = Table(box=box.SIMPLE_HEAVY)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Term")
        table.add_column("Category")
        table.add_column("Searches", justify="right")
        table.add_column("Age", justify="right")
        if self.cfg.get("show_scores"):
            table.add_column("Score", justify="right", style="blue")

        now = self.session.now()
        for i, s in enumerate(suggestions, 1):
            term = escape(s.text) + (" [yellow]+new[/yellow]" if s.is_user_generated else "")
            style = CATEGORY_STYLES.get(s.category, "grey50")
            row = [
                str(i),
                term,
                f"[{style}]{s.category}[/{style}]",
                str(s.frequency),
                f"{int(s.record.hours_since_seen(now))}h ago",
            ]
            if self.cfg.get("show_scores"):
                row.append(str(s.relevance))
            table.add_row(*row)
        return table

    # COMMAND HANDLING -----------------------------------------------------------
    def handle_command(self, line: str):
        """
        Handles slash commands.
        The text after /add is passed through untouched (apostrophes, spacing);
        only /config arguments are shell-split.
        """
        head, _, rest = line.strip().partition(" ")
        cmd, args = head.lower(), rest.split()

        if cmd in ("/q", "/quit", "/exit"):
            self._exit()
        elif cmd == "/help":
            self.console.print(escape(HELP))
        elif cmd == "/add":
            self.commit(rest)
        elif cmd == "/commit":
            self.commit(self.last_query)
        elif cmd == "/pick":
            self._pick(args)
        elif cmd == "/recent":
            self._recent(args)
        elif cmd == "/stats":
            self._stats()
        elif cmd == "/config":
            self._config(rest)
        elif cmd == "/bench":
            self._bench()
        else:
            self.console.print("[red]unknown command[/red] (try /help)")

    def commit(self, text: str):
        if not text.strip():
            self.console.print("[dim]nothing to add[/dim]")
            return
        res = self.session.commit_term(text)
        if not res.learned:
            self.console.print(f"[dim]'{escape(res.term)}' already known, refreshed[/dim]")
            self.search(res.term)

    def _announce_learned(self, record: TermRecord):
        self.log.info(f"learned new term '{record.text}'")
        self.console.print(
            Panel(
                f"Added \"{escape(record.text)}\" to search database",
                title="New term learned!",
                border_style="green",
            )
        )

    def _pick(self, args: List[str]):
        suggestions = self.last_result.suggestions
        try:
            idx = int(args[0]) - 1
        except (IndexError, ValueError):
            self.console.print("usage: /pick <n>")
            return
        if not 0 <= idx < len(suggestions):
            self.console.print(f"[red]no suggestion {idx + 1}[/red]")
            return
        chosen: RankedSuggestion = suggestions[idx]
        self.session.select_suggestion(chosen)
        self.console.print(f"selected [bold]{escape(chosen.text)}[/bold]")
        # re-search so a later /pick sees the updated record
        self.search(chosen.text)

    def _recent(self, args: List[str]):
        recent = self.session.recent_searches()
        if not args:
            if not recent:
                self.console.print("[dim]no recent searches[/dim]")
            for i, term in enumerate(recent, 1):
                self.console.print(f"{i:>2}. {escape(term)}")
            return
        try:
            term = recent[int(args[0]) - 1]
        except (IndexError, ValueError):
            self.console.print(escape("usage: /recent [n]"))
            return
        self.search(term)
        self.session.touch_recent(term)

    def _stats(self):
        a = self.session.get_analytics()
        table = Table(title="Analytics", box=box.MINIMAL_DOUBLE_HEAD)
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        table.add_row("Total searches", str(a.total_searches))
        table.add_row("New terms learned", str(a.new_terms_learned))
        table.add_row("Avg response", f"{a.average_latency_ms:.2f}ms")
        table.add_row("Current intent", self.session.last_intent or "N/A")
        table.add_row("Known terms", str(len(self.session.index)))
        for key in self.metrics.keys():
            table.add_row(f"{key} (cli avg)", f"{self.metrics.avg(key):.3f}")
        self.console.print(table)

    def _config(self, raw: str):
        try:
            args = shlex.split(raw)
        except ValueError as e:
            self.console.print(f"[red]bad command:[/red] {escape(str(e))}")
            return
        if not args:
            table = Table(box=box.SIMPLE)
            table.add_column("Option")
            table.add_column("Value")
            for k, v in self.cfg.rows():
                table.add_row(k, str(v))
            self.console.print(table)
        elif len(args) == 2:
            if self.cfg.set(args[0], args[1]):
                self._apply_config(args[0])
                self.console.print(f"{args[0]} = {self.cfg.get(args[0])}")
            else:
                self.console.print("[red]No such option or bad value[/red]")
        else:
            self.console.print(escape("usage: /config [key val]"))

    def _apply_config(self, key: str):
        """Push options that the live session reads onto it."""
        if key == "max_suggestions":
            self.session.ranker.limit = self.cfg.get(key)
        elif key == "recent_limit":
            self.session.recent_limit = self.cfg.get(key)

    def _bench(self):
        words = ["ma", "react", "python", "java", "how to", "d", "s"]
        with Log.time_block("bench 100 searches", path=self.cfg.get("log_path")) as timer:
            for _ in range(100):
                self.session.search(self.rng.choice(words))
        self.metrics.record("bench_s", timer.elapsed)

    def _exit(self):
        self.running = False
        self.console.print("bye.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Adaptive search portal (terminal)")
    parser.add_argument("--config", default="config.json", help="path to JSON config")
    parser.add_argument("--no-seed", action="store_true", help="start with an empty index")
    args = parser.parse_args(argv)

    cli = CLI(cfg=Config(args.config), seed=False if args.no_seed else None)
    cli.run()


if __name__ == "__main__":
    main()
