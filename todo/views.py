# ---- stdlib -----------------------------------------------------------------
import logging

# ---- Django ------------------------------------------------------------------
from django.http import Http404, HttpResponseBadRequest
from django.shortcuts import render, redirect
from django.views.decorators.http import require_GET, require_http_methods

# ---- App ---------------------------------------------------------------------
from .exceptions import NotFoundError, PreconditionError
from .forms import TaskForm
from .params import parse_bool_param
from .services import task_service

# ---- Logging -----------------------------------------------------------------
logger = logging.getLogger(__name__)


# =============================================================================
# Task list
# =============================================================================

@require_GET
def tasks(request):
    """All tasks, or only the open/closed ones with ?closed=false|true."""
    try:
        closed = parse_bool_param("closed", request.GET.get("closed"))
    except PreconditionError as e:
        logger.info("Bad /tasks request: %s", e)
        return HttpResponseBadRequest(str(e))

    service = task_service()
    if closed is None:
        items, title = service.find_all_tasks(), "Tasks"
    elif closed:
        items, title = service.filter_tasks(True), "Closed tasks"
    else:
        items, title = service.filter_tasks(False), "Open tasks"

    return render(request, "todo/tasks.html", {"tasks": items, "title": title})


# =============================================================================
# Create / update through the HTML form
# =============================================================================

@require_http_methods(["GET", "POST"])
def new_task(request):
    if request.method == "POST":
        form = TaskForm(request.POST)
        if form.is_valid():
            try:
                task_service().add_task(form.to_model())
            except PreconditionError as e:
                form.add_error(None, str(e))
                return render(request, "todo/new_task.html", {"form": form}, status=400)
            return redirect("todo:tasks")
    else:
        form = TaskForm()
    return render(request, "todo/new_task.html", {"form": form})


def _task_id_param(request):
    raw = request.GET.get("id")
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


@require_http_methods(["GET", "POST"])
def update_task(request):
    if request.method == "POST":
        form = TaskForm(request.POST)
        if form.is_valid():
            try:
                task_service().update_task(form.to_model())
            except NotFoundError as e:
                raise Http404(str(e))
            except PreconditionError as e:
                logger.info("Rejected task update: %s", e)
                form.add_error(None, str(e))
                return render(request, "todo/update_task.html", {"form": form}, status=400)
            return redirect("todo:tasks")
        return render(request, "todo/update_task.html", {"form": form})

    task_id = _task_id_param(request)
    if task_id is None:
        return HttpResponseBadRequest("Query parameter 'id' must be an integer")
    task = task_service().find_task(task_id)
    if task is None:
        raise Http404(f"No task with id {task_id}")
    return render(request, "todo/update_task.html", {"form": TaskForm.from_model(task), "task": task})
