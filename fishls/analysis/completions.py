"""
Completion catalog.

The builtin catalog is a static, ordered table of fish keywords, builtins and
common commands. User-defined symbols from the current document are appended
after it. No filtering happens here; editors filter by the typed prefix.
"""

from __future__ import annotations

from lsprotocol.types import CompletionItem, CompletionItemKind, InsertTextFormat

from fishls.analysis.patterns import VARIABLE_SIGIL
from fishls.workspace.document_state import DocumentSymbols

_Function = CompletionItemKind.Function
_Keyword = CompletionItemKind.Keyword
_Variable = CompletionItemKind.Variable

# (label, kind, insert text)
BUILTIN_CATALOG: tuple[tuple[str, CompletionItemKind, str], ...] = (
    ("echo", _Function, 'echo "${1}"'),
    ("function", _Keyword, "function $1\n\t$0\nend"),
    ("set", _Keyword, "set $1 $2 $3"),
    ("for", _Keyword, "for $1 in $2\n\t$0\nend"),
    ("while", _Keyword, "while $1\n\t$0\nend"),
    ("if", _Keyword, "if $1\n\t$0\nend"),
    ("elif", _Keyword, "elif $1\n\t$0\nend"),
    ("else", _Keyword, "else\n\t$0\nend"),
    ("return", _Keyword, "return $1"),
    ("exit", _Keyword, "exit $1"),
    ("source", _Keyword, "source $1"),
    ("cd", _Keyword, "cd $1"),
    ("pwd", _Keyword, "pwd"),
    ("ls", _Keyword, "ls $1"),
    ("cat", _Keyword, "cat $1"),
    ("rm", _Keyword, "rm $1"),
    ("mv", _Keyword, "mv $1 $2"),
    ("cp", _Keyword, "cp $1 $2"),
    ("mkdir", _Keyword, "mkdir $1"),
    ("rmdir", _Keyword, "rmdir $1"),
    ("touch", _Keyword, "touch $1"),
    ("chmod", _Keyword, "chmod $1 $2"),
    ("chown", _Keyword, "chown $1 $2"),
    ("chgrp", _Keyword, "chgrp $1 $2"),
    ("ln", _Keyword, "ln $1 $2"),
    ("grep", _Keyword, "grep $1 $2"),
    ("sed", _Keyword, "sed $1 $2"),
    ("awk", _Keyword, "awk $1 $2"),
    ("cut", _Keyword, "cut $1 $2"),
    ("sort", _Keyword, "sort $1"),
    ("uniq", _Keyword, "uniq $1"),
    ("wc", _Keyword, "wc $1"),
    ("head", _Keyword, "head $1"),
    ("tail", _Keyword, "tail $1"),
    ("date", _Keyword, "date"),
    ("sleep", _Keyword, "sleep $1"),
    ("kill", _Keyword, "kill $1"),
    ("ps", _Keyword, "ps"),
    ("top", _Keyword, "top"),
    ("free", _Keyword, "free"),
    ("df", _Keyword, "df"),
    ("du", _Keyword, "du"),
    ("uname", _Keyword, "uname"),
    ("uptime", _Keyword, "uptime"),
    ("who", _Keyword, "who"),
    ("w", _Keyword, "w"),
    ("users", _Keyword, "users"),
    ("groups", _Keyword, "groups"),
    ("id", _Keyword, "id"),
    ("whoami", _Keyword, "whoami"),
    ("hostname", _Keyword, "hostname"),
    ("ping", _Keyword, "ping $1"),
    ("ss", _Keyword, "ss"),
    ("test", _Keyword, "test $1 $2 $3"),
    ("break", _Keyword, "break"),
    ("continue", _Keyword, "continue"),
    ("switch", _Keyword, "switch $1\n\tcase $2\n\t\t$0\n\tbreak\nend"),
    ("case", _Keyword, "case $1\n\t$0\nbreak"),
    ("builtin", _Keyword, "builtin $1 $2"),
    ("time", _Keyword, "time $1"),
    ("begin", _Keyword, "begin\n\t$0\nend"),
    ("end", _Keyword, "end"),
    ("set_color", _Keyword, "set_color $1 $2"),
    ("read", _Keyword, "read $1 $2"),
    ("string", _Keyword, "string $1 $2"),
    ("math", _Keyword, "math $1 $2"),
    ("argparse", _Keyword, "argparse $1 $2"),
    ("count", _Keyword, "count $1 $2"),
    ("type", _Keyword, "type $1"),
    ("contains", _Keyword, "contains $1 $2"),
    ("abbr", _Keyword, "abbr $1 $2"),
    ("bind", _Keyword, "bind $1 $2 $3"),
    ("complete", _Keyword, "complete $1 $2 $3"),
    ("commandline", _Keyword, "commandline $1 $2"),
    ("fish_config", _Keyword, "fish_config $1 $2"),
    ("random", _Keyword, "random $1 $2 $3"),
    ("argv", _Variable, "argv[$1]"),
)


def _insert_text_format(insert_text: str) -> InsertTextFormat:
    if "$" in insert_text:
        return InsertTextFormat.Snippet
    return InsertTextFormat.PlainText


BUILTIN_COMPLETIONS: tuple[CompletionItem, ...] = tuple(
    CompletionItem(
        label=label,
        kind=kind,
        insert_text=insert_text,
        insert_text_format=_insert_text_format(insert_text),
    )
    for label, kind, insert_text in BUILTIN_CATALOG
)


def function_completion(name: str) -> CompletionItem:
    return CompletionItem(
        label=name,
        kind=CompletionItemKind.Keyword,
        insert_text=name,
        insert_text_format=InsertTextFormat.PlainText,
    )


def variable_completion(name: str) -> CompletionItem:
    # The sigil is escaped so snippet-aware clients insert it literally
    return CompletionItem(
        label=name,
        kind=CompletionItemKind.Variable,
        insert_text=f"\\{VARIABLE_SIGIL}{name}",
        insert_text_format=InsertTextFormat.Snippet,
    )


def build_completion_items(symbols: DocumentSymbols) -> list[CompletionItem]:
    """
    Merge the builtin catalog with the document's own symbols.

    Builtins come first in declared order, then one item per function
    declaration, then one item per variable declaration.
    """
    items = list(BUILTIN_COMPLETIONS)
    items.extend(function_completion(name) for name in symbols.custom_functions)
    items.extend(variable_completion(name) for name in symbols.custom_variables)
    return items
