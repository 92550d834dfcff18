"""
Campground controller: one operation per route, each returning an outcome.
"""
from starlette.concurrency import run_in_threadpool

from src.api.pipeline import Fault, Redirect, RequestContext, View, catch_async

NOT_FOUND_MESSAGE = "Campground not found"


class CampgroundController:
    def __init__(self, store):
        self.store = store

    async def home(self, ctx: RequestContext):
        return View("home.html")

    @catch_async
    async def index(self, ctx: RequestContext):
        camps = await run_in_threadpool(self.store.find_all)
        return View("campgrounds/index.html", {"camps": camps})

    async def new_form(self, ctx: RequestContext):
        return View("campgrounds/new.html")

    @catch_async
    async def create(self, ctx: RequestContext):
        camp = await run_in_threadpool(self.store.insert, ctx.data)
        return Redirect(f"/campgrounds/{camp.id}")

    @catch_async
    async def show(self, ctx: RequestContext):
        camp = await run_in_threadpool(self.store.find_by_id, ctx.params["id"])
        if camp is None:
            return Fault(NOT_FOUND_MESSAGE, 404)
        return View("campgrounds/show.html", {"camp": camp})

    @catch_async
    async def edit_form(self, ctx: RequestContext):
        camp = await run_in_threadpool(self.store.find_by_id, ctx.params["id"])
        if camp is None:
            return Fault(NOT_FOUND_MESSAGE, 404)
        return View("campgrounds/edit.html", {"camp": camp})

    @catch_async
    async def update(self, ctx: RequestContext):
        camp = await run_in_threadpool(self.store.update_by_id, ctx.params["id"], ctx.data)
        if camp is None:
            return Fault(NOT_FOUND_MESSAGE, 404)
        return Redirect(f"/campgrounds/{camp.id}")

    @catch_async
    async def delete(self, ctx: RequestContext):
        # Deleting an unknown id is not an error; the list simply won't show it.
        await run_in_threadpool(self.store.delete_by_id, ctx.params["id"])
        return Redirect("/campgrounds")
