# selenium_runner.py
import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from selenium import webdriver
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.support.ui import WebDriverWait
from webdriver_manager.chrome import ChromeDriverManager

from . import dom
from .errors import A11yError, EngineError, InjectionError
from .options import RunOptions
from .report_processor import process

INJECT_FAILED = "Unable to inject scripts into the page"

# ----------------------------
# In-page scripts
# ----------------------------

ADD_SCRIPT_TAG = """
var script = document.createElement('script');
script.src = arguments[0];
document.head.appendChild(script);
"""

HTMLCS_LOADED = "return typeof window.HTMLCS !== 'undefined';"

# Runs HTML_CodeSniffer and hands the messages back through the async-script
# callback. DOM nodes cannot cross the WebDriver boundary with their parent
# links intact, so each element is flattened into a snapshot of its ancestor
# chain up to the first node with an id.
RUN_HTMLCS = """
var standard = arguments[0];
var done = arguments[arguments.length - 1];

function describe(node) {
    return {id: node.id || '', nodeType: node.nodeType, tagName: node.tagName || ''};
}

function snapshot(element) {
    if (!element || element.nodeType === undefined) {
        return {};
    }
    var root = describe(element);
    root.innerHTML = element.innerHTML;
    root.outerHTML = element.outerHTML;
    var current = root, node = element;
    while (node.nodeType === 1 && !node.id && node.parentNode) {
        var parent = node.parentNode;
        var siblings = Array.prototype.slice.call(parent.childNodes);
        current.index = siblings.indexOf(node);
        current.parentNode = describe(parent);
        current.parentNode.childNodes = siblings.map(describe);
        current = current.parentNode;
        node = parent;
    }
    return root;
}

try {
    window.HTMLCS.process(standard, window.document, function () {
        done({messages: window.HTMLCS.getMessages().map(function (message) {
            return {code: message.code, msg: message.msg, type: message.type,
                    element: snapshot(message.element)};
        })});
    }, function () {
        done({error: 'error running HTML_CodeSniffer'});
    });
} catch (error) {
    done({error: 'error running HTML_CodeSniffer: ' + error.stack});
}
"""

# ----------------------------
# Driver
# ----------------------------

def get_driver(options: RunOptions) -> webdriver.Chrome:
    chrome_options = ChromeOptions()
    if options.headless:
        chrome_options.add_argument("--headless=new")
    chrome_options.add_argument("--no-sandbox")
    chrome_options.add_argument("--disable-dev-shm-usage")
    chrome_options.add_argument("--window-size=1920,1080")
    chrome_options.add_argument(f"--user-agent={options.user_agent}")
    if options.ignore_ssl_errors:
        chrome_options.add_argument("--ignore-certificate-errors")
    service = ChromeService(ChromeDriverManager().install())
    driver = webdriver.Chrome(service=service, options=chrome_options)
    driver.set_script_timeout(options.timeout)
    return driver

# ----------------------------
# Engine
# ----------------------------

def inject_htmlcs(driver, source: str, timeout: float = 30) -> None:
    """Load HTML_CodeSniffer from a local file or a URL into the current page."""
    try:
        if os.path.isfile(source):
            with open(source, "r", encoding="utf-8") as f:
                driver.execute_script(f.read())
        else:
            driver.execute_script(ADD_SCRIPT_TAG, source)
            WebDriverWait(driver, timeout).until(lambda d: d.execute_script(HTMLCS_LOADED))
        loaded = driver.execute_script(HTMLCS_LOADED)
    except TimeoutException as e:
        raise InjectionError(INJECT_FAILED) from e
    except WebDriverException as e:
        raise InjectionError(f"{INJECT_FAILED}: {e.msg or e}") from e

    if not loaded:
        raise InjectionError(INJECT_FAILED)


def run_htmlcs(driver, standard: str) -> List[Dict[str, Any]]:
    try:
        result = driver.execute_async_script(RUN_HTMLCS, standard)
    except WebDriverException as e:
        raise EngineError(f"error running HTML_CodeSniffer: {e.msg or e}") from e

    if not isinstance(result, dict):
        raise EngineError("Could not read results back from the page")
    if result.get("error"):
        raise EngineError(str(result["error"]))

    raw = []
    for message in result.get("messages") or []:
        message = dict(message)
        message["element"] = dom.from_snapshot(message.get("element"))
        raw.append(message)
    return raw


def audit_page(driver, url: str, options: RunOptions) -> List[Dict[str, Any]]:
    options.log.info(f"Auditing {url}")
    driver.get(url)
    if options.wait > 0:
        options.log.debug(f"Waiting for {options.wait}ms")
        time.sleep(options.wait / 1000)

    options.log.debug(f"Injecting HTML_CodeSniffer from {options.htmlcs}")
    inject_htmlcs(driver, options.htmlcs, timeout=options.timeout)
    options.log.debug(f"Running HTML_CodeSniffer ({options.standard})")
    raw = run_htmlcs(driver, options.standard)
    entries = process(options, raw)
    options.log.debug(f"{len(raw)} messages, {len(entries)} reported")
    return entries

# ----------------------------
# Orchestrator
# ----------------------------

@dataclass
class ScanResult:
    url: str
    entries: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def scan_urls(urls: Iterable[str], options: RunOptions, driver=None) -> List[ScanResult]:
    """
    Audit every URL with one browser session. A page that fails is recorded
    as a failed ScanResult and the run moves on to the next URL.
    """
    owns_driver = driver is None
    if owns_driver:
        driver = get_driver(options)
    results = []
    try:
        for url in urls:
            try:
                results.append(ScanResult(url, audit_page(driver, url, options)))
            except (A11yError, WebDriverException) as e:
                message = getattr(e, "msg", None) or str(e)
                options.log.error(f"Error scanning {url}: {message}")
                results.append(ScanResult(url, error=message))
    finally:
        if owns_driver:
            driver.quit()
    return results
