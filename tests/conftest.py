import sys
import time
from pathlib import Path

import pytest

from sitebuild.config import Layout


SAMPLE_FILES = {
    "src/index.php": """<?php $title = "Home"; ?>
<!doctype html>
<html>
<head><link rel="stylesheet" href="/assets/main.css"></head>
<body class="min-h-screen bg-gray-100">
  <main class="mx-auto p-4 md:flex hover:bg-blue-600">
    <h1 class="text-2xl font-bold"><?= $title ?></h1>
  </main>
  <script src="/assets/app.js"></script>
</body>
</html>
""",
    "src/pages/about.html": """<div class="select-none text-center">About</div>
""",
    "src/js/app.js": """import { greet } from "./greet.js";

document.body.classList.add("flex");
greet();
""",
    "src/js/greet.js": """export function greet() {
  console.log("hi");
}
""",
    "src/styles/_vars.scss": """$text: #333333;
$radius: 4px;
""",
    "src/styles/components/_button.scss": """.btn {
  border-radius: $radius;
  user-select: none;
}
""",
    "src/styles/main.scss": """@import "vars";
@import "components/button";

@tailwind utilities;

/* page chrome */
body {
  color: $text;
  margin: 0;
}

.banner {
  content: "a  b";
  backdrop-filter: blur(4px);
}
""",
    "src/assets/img/logo.svg": """<svg xmlns="http://www.w3.org/2000/svg"></svg>
""",
    "src/assets/fonts/readme.txt": """fonts go here
""",
}


def write_tree(root: Path, files: dict) -> None:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


# Stand-ins for the node tools: same command line, same publish-on-success
# behaviour, without needing node_modules.
FAKE_POSTCSS = r'''
import sys
from pathlib import Path

args = sys.argv[1:]
source = Path(args[0])
plugins = args[args.index("--use") + 1:args.index("-o")]
target = Path(args[args.index("-o") + 1])

css = source.read_text(encoding="utf-8")
if "postcss-error" in css:
    sys.stderr.write("CssSyntaxError: postcss-error\n")
    sys.exit(1)
css = "/* plugins: " + " ".join(plugins) + " */\n" + css
if "cssnano" in plugins:
    css = " ".join(css.split()) + "\n"
target.write_text(css, encoding="utf-8")
'''

FAKE_ESBUILD = r'''
import re
import sys
import time
from pathlib import Path

args = sys.argv[1:]
entry = Path(args[0])
outdir = Path(next(a.split("=", 1)[1] for a in args if a.startswith("--outdir=")))


def bundle():
    source = entry.read_text(encoding="utf-8")
    if source.count("{") != source.count("}"):
        sys.stderr.write("ERROR: Expected \"}\" in " + str(entry) + "\n")
        return False
    parts = []
    for match in re.finditer(r"from\s+[\"'](\./[^\"']+)[\"']", source):
        parts.append((entry.parent / match.group(1)).read_text(encoding="utf-8").replace("export ", ""))
    parts.append(re.sub(r"^import .*$", "", source, flags=re.M))
    js = "\n".join(parts)
    name = entry.stem + ".js"
    outdir.mkdir(parents=True, exist_ok=True)
    if "--minify" in args:
        js = " ".join(js.split()) + "\n"
    if "--sourcemap" in args:
        js += "//# sourceMappingURL=" + name + ".map\n"
        (outdir / (name + ".map")).write_text("{}", encoding="utf-8")
    (outdir / name).write_text(js, encoding="utf-8")
    return True


ok = bundle()
if "--watch=forever" in args:
    while True:
        time.sleep(1)
sys.exit(0 if ok else 1)
'''


def install_tool(root: Path, name: str, body: str) -> Path:
    path = root / "node_modules" / ".bin" / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!" + sys.executable + "\n" + body, encoding="utf-8")
    path.chmod(0o755)
    return path


@pytest.fixture
def bare_site(tmp_path) -> Layout:
    """A small PHP site source tree under a temporary project root."""
    root = tmp_path.resolve()
    write_tree(root, SAMPLE_FILES)
    return Layout.from_root(root)


@pytest.fixture
def site(bare_site) -> Layout:
    """The sample site with stand-in postcss and esbuild in node_modules/.bin."""
    install_tool(bare_site.root, "postcss", FAKE_POSTCSS)
    install_tool(bare_site.root, "esbuild", FAKE_ESBUILD)
    return bare_site


def _wait_for(predicate, timeout=10.0, interval=0.1) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@pytest.fixture
def wait_for():
    """Poll a predicate until it holds or the timeout passes."""
    return _wait_for
