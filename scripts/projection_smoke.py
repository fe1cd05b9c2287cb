from __future__ import annotations

from src.tools.projection_tools import tool_project_wealth

def main():
    out = tool_project_wealth({
        "currentInvestments": "5000000",
        "currentSavings": "1000000",
        "rateOfReturn": "8",
        "sipMonthly": "100000",
        "salaryMonthly": "500000",
        "yearlySalaryIncrement": "5",
        "inflation": "2",
        "years": "20",
    })
    print("Starting wealth:", out["projection"]["startingWealth"])
    for row in out["projection"]["series"][:3]:
        print("Year", row["year"], row["totalWealth"], row["realWealth"], row["monthlySIP"])
    s = out["summary"]
    print("Final total wealth:", s["finalTotalWealth"])
    print("Final real wealth:", s["finalRealWealth"])
    print("Total growth:", s["totalGrowth"])

if __name__ == "__main__":
    main()
