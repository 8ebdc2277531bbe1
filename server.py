"""
MCP Server for HVAC air duct sizing.

This server sizes rectangular and round air ducts (velocity, friction
pressure loss, hydraulic diameter), selects SMACNA construction requirements
(gauge, joint spacing, hanger spacing, seams) and checks the result against
SMACNA limits.

The calculation engine lives in the duct_sizer package; the omnitools wrap it
as JSON-returning MCP tools.
"""

import logging
from mcp.server.fastmcp import FastMCP

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("duct-sizer")

# Initialize the MCP server
mcp = FastMCP("duct-sizer")

# Import omnitools (consolidated tools)
from omnitools.duct_sizing import duct_sizing
from omnitools.smacna_lookup import smacna_lookup
from omnitools.duct_selection import duct_selection
from omnitools.parameter_sweep import parameter_sweep
from omnitools.properties import properties
from omnitools.help_resources import help_resources

# Register omnitools with MCP
mcp.tool()(duct_sizing)
mcp.tool()(smacna_lookup)
mcp.tool()(duct_selection)
mcp.tool()(parameter_sweep)
mcp.tool()(properties)
mcp.tool()(help_resources)

# Log information about available dependencies
from utils.import_helpers import COOLPROP_AVAILABLE
from duct_sizer.config import TOOL_CONFIG


def main():
    logger.info("Starting %s MCP server v%s...", TOOL_CONFIG.name, TOOL_CONFIG.version)
    logger.info("CoolProp available: %s", COOLPROP_AVAILABLE)
    logger.info("Features: %s", TOOL_CONFIG.features.model_dump())

    # Log which omnitools are registered
    logger.info("Registered omnitools:")
    logger.info("  - duct_sizing: Velocity, pressure loss, gauge, spacing and SMACNA compliance")
    logger.info("  - smacna_lookup: Gauge, joint, hanger, seam and velocity limit lookups")
    logger.info("  - duct_selection: Duct size for a target velocity or pressure loss")
    logger.info("  - parameter_sweep: Sweep one duct input")
    logger.info("  - properties: Air and duct material properties")
    logger.info("  - help_resources: Materials, applications, tables and configuration")

    # Start the server
    mcp.run()


if __name__ == "__main__":
    main()
