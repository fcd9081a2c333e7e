"""Workspace hierarchy tools: teams, spaces, folders, lists."""

from __future__ import annotations

from clickup_mcp.clickup.errors import InvalidParameterError
from clickup_mcp.constants import ResponseFormat
from clickup_mcp.lifespan import get_clickup_client, get_settings
from clickup_mcp.shaping.formatting import (
    format_folder_markdown,
    format_list_markdown,
    format_space_markdown,
    to_json,
)
from clickup_mcp.tools._common import bounded, clickup_tool


@clickup_tool("clickup_get_teams")
async def get_teams(response_format: ResponseFormat = ResponseFormat.MARKDOWN) -> str:
    """List the teams (workspaces) the API token can access."""
    client = get_clickup_client()
    teams = (await client.get_teams()).get("teams") or []

    if response_format == ResponseFormat.JSON:
        result = to_json({"teams": teams})
    else:
        lines = ["# Teams", ""]
        for team in teams:
            members = len(team.get("members") or [])
            lines.append(f"- **{team.get('name')}** ({team.get('id')}) - {members} members")
        if not teams:
            lines.append("No teams found.")
        result = "\n".join(lines)
    return bounded(result, len(teams), "teams", get_settings().character_limit)


@clickup_tool("clickup_get_spaces")
async def get_spaces(
    team_id: str,
    archived: bool = False,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """List the spaces in a team."""
    client = get_clickup_client()
    spaces = (await client.get_spaces(team_id, archived=archived)).get("spaces") or []

    if response_format == ResponseFormat.JSON:
        result = to_json({"spaces": spaces})
    else:
        sections = [f"# Spaces in Team {team_id}", ""]
        sections.extend(format_space_markdown(s) + "\n\n---\n" for s in spaces)
        result = "\n".join(sections)
    return bounded(result, len(spaces), "spaces", get_settings().character_limit)


@clickup_tool("clickup_get_folders")
async def get_folders(
    space_id: str,
    archived: bool = False,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """List the folders in a space, with the lists each folder holds."""
    client = get_clickup_client()
    folders = (await client.get_folders(space_id, archived=archived)).get("folders") or []

    if response_format == ResponseFormat.JSON:
        result = to_json({"folders": folders})
    else:
        sections = [f"# Folders in Space {space_id}", ""]
        sections.extend(format_folder_markdown(f) + "\n\n---\n" for f in folders)
        result = "\n".join(sections)
    return bounded(result, len(folders), "folders", get_settings().character_limit)


@clickup_tool("clickup_get_lists")
async def get_lists(
    folder_id: str | None = None,
    space_id: str | None = None,
    archived: bool = False,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """List the lists in a folder, or the folderless lists of a space.

    Exactly one of folder_id or space_id must be given.
    """
    if bool(folder_id) == bool(space_id):
        raise InvalidParameterError("Provide exactly one of folder_id or space_id.")
    client = get_clickup_client()
    if folder_id:
        data = await client.get_folder_lists(folder_id, archived=archived)
        title = f"Lists in Folder {folder_id}"
    else:
        data = await client.get_folderless_lists(space_id, archived=archived)
        title = f"Folderless Lists in Space {space_id}"
    lists = data.get("lists") or []

    if response_format == ResponseFormat.JSON:
        result = to_json({"lists": lists})
    else:
        sections = [f"# {title}", ""]
        sections.extend(format_list_markdown(lst) + "\n\n---\n" for lst in lists)
        result = "\n".join(sections)
    return bounded(result, len(lists), "lists", get_settings().character_limit)


@clickup_tool("clickup_get_list_details")
async def get_list_details(
    list_id: str,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """Get a list's details, including its statuses and task count."""
    client = get_clickup_client()
    lst = await client.get_list(list_id)
    if response_format == ResponseFormat.JSON:
        return to_json(lst)
    return format_list_markdown(lst)
