# quantumn

Building blocks for a local-first coding assistant:

- **Router** (`quantumn.router`): sorts a user prompt into an intent, a complexity level, an execution mode, a model tier, a tool policy, a context budget and a memory policy. Every function here is pure.
- **Retrieval** (`quantumn.rag`): keyword-based retrieval over documents split into line chunks, and helpers that make prompts and context shorter.
- **Tools** (`quantumn.tools`): read, write, append to and edit text files, search them with regular expressions, find files by pattern or extension, and run external commands.
- **Supervisor** (`quantumn.supervisor`): starts and stops a `llama-server` process that serves one GGUF model at a time.

The package has no third-party dependencies.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Routing a prompt

`route(prompt, cwd, config)` in `quantumn.router.routing` runs all layers and returns a `RoutingDecision`:

```python
from quantumn.router.routing import route
from quantumn.router.types import RouterConfig

decision = route("read src/main.rs", "/project", RouterConfig())
print(decision.intent, decision.mode, decision.model_tier)
print(decision.tools.is_tool_allowed("Read"))   # True
print(decision.confidence, decision.reasoning)
```

Set `RouterConfig(prefer_local=True)` to have trivial and simple tasks routed to `ModelTier.LOCAL` instead of `ModelTier.FAST`.

Each layer can also be called on its own:

| Module | Functions |
| --- | --- |
| `quantumn.router.analyzer` | `classify_intent`, `score_complexity`, `estimate_file_scope` |
| `quantumn.router.mode` | `pick_mode`, `can_transition`, `transition`, `get_mode_instruction`, `get_mode_display` |
| `quantumn.router.model` | `pick_model_tier`, `get_model_for_tier`, `tier_supports_streaming`, `estimate_cost_per_1k` |
| `quantumn.router.tool_policy` | `pick_tools`, `filter_tools_by_policy` |
| `quantumn.router.context` | `pick_budget`, `agent_token_budget`, `estimate_prompt_tokens` |
| `quantumn.router.memory` | `pick_memory_policy`, `get_memory_hint` |

```python
from quantumn.router.analyzer import classify_intent, score_complexity
from quantumn.router.context import pick_budget
from quantumn.router.mode import pick_mode

prompt = "refactor the cache layer"
intent = classify_intent(prompt)
complexity = score_complexity(prompt)
mode = pick_mode(intent, complexity)
budget = pick_budget(complexity, mode)
print(budget.tokens())
```

The enums (`Intent`, `Complexity`, `AgentMode`, `ModelTier`, `ContextBudget`, `MemoryPolicy`) and the dataclasses (`ToolPolicy`, `RoutingDecision`, `RouterConfig`, `RagRouterConfig`, `PromptCompactionConfig`) live in `quantumn.router.types`. `AgentMode.can_transition_to` encodes which mode changes are allowed, and `ModelTier.default_model` gives the default model name for a tier.

## Retrieval

```python
from quantumn.rag import RagConfig, RagIndex

index = RagIndex(RagConfig())
index.add_document("main.rs", 'fn main() { println!("hello"); }')
result = index.search("main function", None)
print(result.used, len(result.chunks))
print(result.format_context())
```

Passing a token budget to `search` limits the number of chunks to 30% of that budget divided by the chunk size, between 1 and 15. `KeywordRetriever` and `Document.from_content` can be used directly, and `compress_prompt` and `format_context_compact` shorten prompts and chunk listings. `COMPACT_SYSTEM` and `ULTRA_COMPACT` are short system-prompt templates with `{mode}` and `{context}` placeholders.

## File tools

```python
from quantumn.tools.files import edit_line, read_file_with_lines, write_file
from quantumn.tools.grep import search_file

write_file("notes/todo.txt", "one\ntwo\nthree")   # creates notes/ if needed
edit_line("notes/todo.txt", 2, "TWO")
print(read_file_with_lines("notes/todo.txt"))
for hit in search_file("notes/todo.txt", "t[wh]"):
    print(hit.line, hit.content)
```

- `quantumn.tools.files`: `read_file`, `read_file_with_lines`, `read_file_limit`, `write_file`, `append_file`, `edit_line`.
- `quantumn.tools.grep`: `search_file`, `search_pattern`, `search_with_context`, returning `SearchResult` objects.
- `quantumn.tools.globbing`: `find_files` (a pattern with `*` is matched on file names by its leading and trailing parts; any other pattern is an exact relative path), `find_by_extension`, and `find_all_files`, which skips hidden directories and `node_modules`, `target`, `build`, `dist` and `vendor`.
- `quantumn.tools.shell`: `run_command`, `run_command_in_dir` and `run_command_string` run a program with arguments (no shell) and capture its output; `command_exists` asks `which`.

File, regex and command failures raise `quantumn.tools.files.ToolError`.

## Supervising a local model server

```python
from quantumn.supervisor import ModelSupervisor

with ModelSupervisor(port=8080) as supervisor:
    supervisor.add_model_path("llama3.2", "/models/llama3.2.gguf")
    supervisor.ensure("llama3.2")   # starts llama-server and waits up to 60 s for its port
    print(supervisor.base_url(), supervisor.active_model())
    print(supervisor.health_check())
# leaving the block stops the server
```

`ensure` does nothing if the same model is already being served, and otherwise stops the current server and starts a new one with a context size of 8192. `set_speculative_decoding` adds a draft model for speculative decoding to servers started afterwards. `llama-server` has to be on your `PATH`. Failures raise `quantumn.supervisor.SupervisorError`.

## What this package does not do

- It has no command-line program and no interactive terminal interface.
- It does not talk to any model provider. The router only names a model tier and its default model name; sending prompts and reading replies is left to the caller.
- It does not discover locally installed models; the supervisor serves only model files you register with `add_model_path`.
- Retrieval is keyword matching in memory; nothing is embedded or stored on disk.

## Running the tests

```
pytest
```