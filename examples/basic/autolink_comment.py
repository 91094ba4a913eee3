"""Autolink a pull request comment in 3 lines — zero config, zero deps."""

from ghautolinks import GitHubAutolinks

md = GitHubAutolinks("octo/hello-world")
print(md("Fixes #26 and GH-27, thanks @octocat (a5c3785ed8d6a35868bc169f07e40e889087fd2e)"))
