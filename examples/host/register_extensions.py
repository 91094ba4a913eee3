"""Wire the extensions into a host parser's inline extension point.

A host only needs the start/tokenizer/renderer triad of each extension.
This toy host keeps a table of them and renders one text run; a real
Markdown parser does the same inside its own inline tokenizer.
"""

from ghautolinks import InlineScanner, github_autolinks, github_mentions

# All syntaxes, resolving #26 and bare SHAs against one repository
bundle = github_autolinks("octo/hello-world")
for ext in bundle:
    print(f"{ext.name:32} level={ext.level}")

# Mentions only, e.g. for a chat preview without repository context
print(InlineScanner(github_mentions()).render("ping @octocat about #26"))

# The same body rendered with and without a repository
text = "Closes #26"
print(InlineScanner(github_autolinks()).render(text))
print(InlineScanner(bundle).render(text))
