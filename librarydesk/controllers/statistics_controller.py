from flask import Blueprint, jsonify

from librarydesk.services.statistics_service import StatisticsService

stats_bp = Blueprint("statistics", __name__)


@stats_bp.get("/get-statistics")
def get_statistics():
    return jsonify({"success": True, "data": StatisticsService.collect()})
